from django.urls import path

from . import views

app_name = 'transcript_analyze'

urlpatterns = [
    path('analyze', views.TranscriptAnalyzeView.as_view(), name='analyze'),
    path('agents', views.AgentListView.as_view(), name='agents'),
]
