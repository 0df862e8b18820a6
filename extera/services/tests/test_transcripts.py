"""Tests for transcript formatting and the transcript analyze service."""

import unittest
from unittest.mock import MagicMock

from extera.services.transcripts import TranscriptAnalyzeService, format_transcript


class FormatTranscriptTest(unittest.TestCase):
    def test_single_entry(self):
        self.assertEqual(format_transcript([{'role': 'user', 'content': 'Hello'}]), 'user: Hello')

    def test_one_line_per_entry_in_order(self):
        transcript = [
            {'role': 'user', 'content': 'Hi'},
            {'role': 'assistant', 'content': 'Hello, how can I help?'},
            {'role': 'user', 'content': 'Summarize this.'},
        ]
        self.assertEqual(
            format_transcript(transcript),
            'user: Hi\nassistant: Hello, how can I help?\nuser: Summarize this.',
        )

    def test_duplicates_are_kept(self):
        entry = {'role': 'user', 'content': 'ping'}
        self.assertEqual(format_transcript([entry, entry]), 'user: ping\nuser: ping')

    def test_no_trailing_separator(self):
        text = format_transcript([{'role': 'a', 'content': 'b'}, {'role': 'c', 'content': 'd'}])
        self.assertFalse(text.endswith('\n'))
        self.assertEqual(len(text.split('\n')), 2)

    def test_empty_transcript(self):
        self.assertEqual(format_transcript([]), '')


class TranscriptAnalyzeServiceTest(unittest.TestCase):
    def setUp(self):
        self.agent_service = MagicMock()
        self.agent_service.run_agent.return_value = 'completion'
        self.service = TranscriptAnalyzeService(self.agent_service)

    def test_formatted_text_and_extra_fields_form_the_request(self):
        result = self.service.analyze(
            'summarizer',
            [{'role': 'user', 'content': 'Hello'}],
            {'language': 'de'},
        )
        self.assertEqual(result, 'completion')
        self.agent_service.run_agent.assert_called_once_with(
            'summarizer', {'text': 'user: Hello', 'language': 'de'}
        )

    def test_caller_text_field_takes_precedence(self):
        self.service.analyze('summarizer', [{'role': 'user', 'content': 'Hello'}], {'text': 'override'})
        self.agent_service.run_agent.assert_called_once_with('summarizer', {'text': 'override'})

    def test_without_extra_fields(self):
        self.service.analyze('summarizer', [{'role': 'user', 'content': 'Hello'}])
        self.agent_service.run_agent.assert_called_once_with('summarizer', {'text': 'user: Hello'})
