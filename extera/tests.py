import json
import tempfile
from pathlib import Path
from unittest.mock import MagicMock, patch

from django.test import RequestFactory, SimpleTestCase, override_settings
from django.urls import reverse

from .services.ai.openai_provider import OpenAIProvider
from .services.base import AgentRunFailed
from .services.transcripts import TranscriptAnalyzeService
from .services.tests.helpers import write_agent
from .views import TranscriptAnalyzeView


class HomeViewTest(SimpleTestCase):
    def test_home_returns_welcome_message(self):
        response = self.client.get(reverse('home'))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {'message': 'Welcome to Extera Service'})


class AgentsDirMixin:
    """Points ``settings.AGENTS_DIR`` at a fresh temporary directory."""

    def setUp(self):
        super().setUp()
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.agents_dir = Path(tmp.name)
        override = override_settings(AGENTS_DIR=self.agents_dir, OPENAI_API_KEY='sk-test')
        override.enable()
        self.addCleanup(override.disable)

    def post_json(self, payload):
        return self.client.post(
            reverse('transcript_analyze:analyze'),
            data=json.dumps(payload),
            content_type='application/json',
        )


# ---------------------------------------------------------------------------
# Request validation
# ---------------------------------------------------------------------------

class AnalyzeValidationTest(AgentsDirMixin, SimpleTestCase):
    def setUp(self):
        super().setUp()
        patcher = patch('extera.views.TranscriptAnalyzeService.from_settings')
        self.from_settings = patcher.start()
        self.addCleanup(patcher.stop)

    def test_missing_agent_name(self):
        response = self.post_json({'transcript': [{'role': 'user', 'content': 'Hello'}]})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {'success': False, 'error': 'agent_name is required'})
        self.from_settings.assert_not_called()

    def test_missing_transcript(self):
        response = self.post_json({'agent_name': 'summarizer'})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {'success': False, 'error': 'transcript is required'})
        self.from_settings.assert_not_called()

    def test_null_transcript_counts_as_missing(self):
        response = self.post_json({'agent_name': 'summarizer', 'transcript': None})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['error'], 'transcript is required')

    def test_malformed_transcript_entries(self):
        for transcript in ('user: Hello', [{'role': 'user'}], [{'role': 'user', 'content': 3}], ['x']):
            with self.subTest(transcript=transcript):
                response = self.post_json({'agent_name': 'summarizer', 'transcript': transcript})
                self.assertEqual(response.status_code, 400)
                self.assertEqual(
                    response.json()['error'],
                    'transcript must be a list of {role, content} objects',
                )
        self.from_settings.assert_not_called()

    def test_body_must_be_json_object(self):
        for body in ('not json', '[1, 2]'):
            with self.subTest(body=body):
                response = self.client.post(
                    reverse('transcript_analyze:analyze'), data=body, content_type='application/json'
                )
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.json()['error'], 'Request body must be a JSON object')

    def test_get_is_not_allowed(self):
        response = self.client.get(reverse('transcript_analyze:analyze'))
        self.assertEqual(response.status_code, 405)


# ---------------------------------------------------------------------------
# End-to-end through the real store and factory
# ---------------------------------------------------------------------------

class AnalyzeEndToEndTest(AgentsDirMixin, SimpleTestCase):

    @patch.object(OpenAIProvider, 'generate', return_value='{"summary": "A greeting."}')
    def test_summarizer_round_trip(self, generate):
        write_agent(self.agents_dir, name='summarizer')

        response = self.post_json({
            'agent_name': 'summarizer',
            'transcript': [{'role': 'user', 'content': 'Hello'}],
        })

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {'success': True, 'data': '{"summary": "A greeting."}'})
        generate.assert_called_once()
        prompt, params = generate.call_args[0]
        self.assertTrue(prompt.startswith('Summarize.'))
        self.assertIn('Input Schema: {}', prompt)
        self.assertIn('Output Schema: {}', prompt)
        self.assertIn('Examples: []', prompt)
        self.assertIn('"text": "user: Hello"', prompt)
        self.assertEqual(params.temperature, 0.7)

    @patch.object(OpenAIProvider, 'generate', return_value='ok')
    def test_extra_fields_reach_the_prompt(self, generate):
        write_agent(self.agents_dir, name='summarizer')
        self.post_json({
            'agent_name': 'summarizer',
            'transcript': [{'role': 'user', 'content': 'Hello'}],
            'language': 'de',
        })
        prompt = generate.call_args[0][0]
        self.assertIn('"language": "de"', prompt)
        self.assertNotIn('agent_name', prompt)

    def test_unimplemented_provider_maps_to_400(self):
        write_agent(self.agents_dir, name='claude-agent', config={'ai_model': 'ANTHROPIC'})
        response = self.post_json({
            'agent_name': 'claude-agent',
            'transcript': [{'role': 'user', 'content': 'Hello'}],
        })
        self.assertEqual(response.status_code, 400)
        body = response.json()
        self.assertFalse(body['success'])
        self.assertIn('Anthropic client not yet implemented', body['error'])

    def test_unknown_agent_maps_to_400(self):
        response = self.post_json({
            'agent_name': 'nope',
            'transcript': [{'role': 'user', 'content': 'Hello'}],
        })
        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            response.json()['error'],
            "Failed to run agent: Failed to load agent 'nope': Agent 'nope' not found",
        )

    @patch.object(OpenAIProvider, 'generate')
    def test_broken_bundle_maps_to_400_without_provider_call(self, generate):
        write_agent(self.agents_dir, name='summarizer', raw={'config.json': ''})
        response = self.post_json({
            'agent_name': 'summarizer',
            'transcript': [{'role': 'user', 'content': 'Hello'}],
        })
        self.assertEqual(response.status_code, 400)
        self.assertIn('File is empty', response.json()['error'])
        generate.assert_not_called()


# ---------------------------------------------------------------------------
# Injected service
# ---------------------------------------------------------------------------

class InjectedServiceTest(SimpleTestCase):
    def setUp(self):
        self.factory = RequestFactory()
        self.service = MagicMock()
        self.view = TranscriptAnalyzeView.as_view(service=self.service)

    def _post(self, payload):
        request = self.factory.post(
            '/api/transcript-analyze/analyze', data=json.dumps(payload), content_type='application/json'
        )
        return self.view(request)

    def test_extra_fields_are_passed_through(self):
        self.service.analyze.return_value = 'done'
        transcript = [{'role': 'user', 'content': 'Hello'}]
        response = self._post({'agent_name': 'summarizer', 'transcript': transcript, 'tone': 'formal'})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(json.loads(response.content), {'success': True, 'data': 'done'})
        self.service.analyze.assert_called_once_with('summarizer', transcript, {'tone': 'formal'})

    def test_service_errors_become_400(self):
        self.service.analyze.side_effect = AgentRunFailed(RuntimeError('boom'))
        response = self._post({'agent_name': 'a', 'transcript': [{'role': 'user', 'content': 'x'}]})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            json.loads(response.content), {'success': False, 'error': 'Failed to run agent: boom'}
        )

    def test_unexpected_errors_become_400(self):
        self.service.analyze.side_effect = KeyError('role')
        response = self._post({'agent_name': 'a', 'transcript': [{'role': 'user', 'content': 'x'}]})
        self.assertEqual(response.status_code, 400)
        self.assertFalse(json.loads(response.content)['success'])

    def test_empty_transcript_reaches_agent_as_empty_text(self):
        agent_service = MagicMock()
        agent_service.run_agent.return_value = 'nothing to summarize'
        view = TranscriptAnalyzeView.as_view(service=TranscriptAnalyzeService(agent_service))
        request = self.factory.post(
            '/api/transcript-analyze/analyze',
            data=json.dumps({'agent_name': 'summarizer', 'transcript': []}),
            content_type='application/json',
        )

        response = view(request)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            json.loads(response.content), {'success': True, 'data': 'nothing to summarize'}
        )
        agent_service.run_agent.assert_called_once_with('summarizer', {'text': ''})


class AgentListViewTest(AgentsDirMixin, SimpleTestCase):
    def test_lists_agent_directories(self):
        write_agent(self.agents_dir, name='translator')
        write_agent(self.agents_dir, name='summarizer')
        response = self.client.get(reverse('transcript_analyze:agents'))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {'success': True, 'data': ['summarizer', 'translator']})
