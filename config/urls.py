from django.urls import include, path

from extera import views

urlpatterns = [
    path('', views.HomeView.as_view(), name='home'),
    path('api/transcript-analyze/', include('extera.urls')),
]
