"""JSON API views for the transcript-analyze module.

Routes:
  GET   /
  POST  /api/transcript-analyze/analyze
  GET   /api/transcript-analyze/agents
"""

import json
import logging

from django.http import JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from .services.agents.store import AgentDefinitionStore
from .services.base import ServiceError
from .services.transcripts import TranscriptAnalyzeService

logger = logging.getLogger(__name__)


def _error(message, status=400):
    return JsonResponse({'success': False, 'error': message}, status=status)


def _is_valid_transcript(transcript):
    return isinstance(transcript, list) and all(
        isinstance(msg, dict)
        and isinstance(msg.get('role'), str)
        and isinstance(msg.get('content'), str)
        for msg in transcript
    )


class HomeView(View):
    def get(self, request):
        return JsonResponse({'message': 'Welcome to Extera Service'})


@method_decorator(csrf_exempt, name='dispatch')
class TranscriptAnalyzeView(View):
    """Run an agent over a transcript posted as JSON."""

    #: Injected via ``as_view(service=...)``; built from settings when ``None``.
    service = None

    def get_service(self):
        return self.service or TranscriptAnalyzeService.from_settings()

    def post(self, request):
        try:
            body = json.loads(request.body or b'{}')
        except ValueError:
            body = None
        if not isinstance(body, dict):
            return _error('Request body must be a JSON object')

        agent_name = body.pop('agent_name', None)
        transcript = body.pop('transcript', None)

        if not agent_name:
            return _error('agent_name is required')
        if transcript is None:
            return _error('transcript is required')
        if not _is_valid_transcript(transcript):
            return _error('transcript must be a list of {role, content} objects')

        try:
            result = self.get_service().analyze(agent_name, transcript, body)
        except ServiceError as e:
            logger.warning(f"Transcript analysis with {agent_name} failed: {e}")
            return _error(str(e))
        except Exception as e:
            logger.exception(f"Unexpected error analyzing transcript with {agent_name}")
            return _error(str(e) or 'Unknown error')

        return JsonResponse({'success': True, 'data': result})


class AgentListView(View):
    """List the agents available to the analyze endpoint."""

    store = None

    def get(self, request):
        store = self.store or AgentDefinitionStore.from_settings()
        return JsonResponse({'success': True, 'data': store.list_agents()})
