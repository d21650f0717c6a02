import unittest
from unittest.mock import MagicMock

from wordsearch.core.exceptions import RenderError
from wordsearch.engine.validator import locate_word
from wordsearch.service import ServiceConfig, WordSearchRequest, WordSearchService

BLOCKING_WORDS = [letter * 15 for letter in "ABCDEFGHIJKLMNOP"]


class WordSearchServiceTests(unittest.TestCase):
    def setUp(self) -> None:
        self.json_renderer = MagicMock(return_value={"key": "value"})
        self.pdf_renderer = MagicMock(return_value=b"%PDF-1.4 fake")
        self.service = WordSearchService(
            json_renderer=self.json_renderer, pdf_renderer=self.pdf_renderer
        )

    def test_valid_request_returns_grid_words_and_json(self) -> None:
        request = WordSearchRequest(words=["apple", "banana", "cherry"])
        result = self.service.generate_puzzle(request)
        self.assertFalse(result.is_error, result.error)
        self.assertEqual(result.status_code, 200)
        self.assertEqual(result.words, ["apple", "banana", "cherry"])
        self.assertFalse(result.pdf)
        self.assertEqual(result.json, {"key": "value"})
        self.assertIsNone(result.pdf_bytes)
        self.assertEqual(len(result.grid), 15)
        for word in request.words:
            self.assertTrue(locate_word(result.grid, word))
        self.json_renderer.assert_called_once_with(result.puzzle)
        self.pdf_renderer.assert_not_called()

    def test_none_request_is_rejected(self) -> None:
        result = self.service.generate_puzzle(None)
        self.assertTrue(result.is_error)
        self.assertIn("empty", result.error)
        self.assertEqual(result.status_code, 400)

    def test_empty_and_missing_word_lists_are_rejected(self) -> None:
        for words in ([], None):
            with self.subTest(words=words):
                result = self.service.generate_puzzle(WordSearchRequest(words=words))
                self.assertTrue(result.is_error)
                self.assertIn("empty", result.error)
                self.assertEqual(result.status_code, 400)

    def test_too_many_words_is_rejected(self) -> None:
        request = WordSearchRequest(words=[f"word{i}" for i in range(21)])
        result = self.service.generate_puzzle(request)
        self.assertTrue(result.is_error)
        self.assertIn("Too many words", result.error)
        self.assertEqual(result.status_code, 400)
        self.json_renderer.assert_not_called()

    def test_twenty_words_are_accepted(self) -> None:
        request = WordSearchRequest(words=[f"w{chr(ord('a') + i)}" for i in range(20)])
        result = self.service.generate_puzzle(request)
        self.assertFalse(result.is_error, result.error)

    def test_word_too_long_is_a_client_error(self) -> None:
        request = WordSearchRequest(words=["abcdefghijklmnopqrstuvwxyzabcde"])
        result = self.service.generate_puzzle(request)
        self.assertTrue(result.is_error)
        self.assertIn("exceeds", result.error)
        self.assertEqual(result.status_code, 400)
        self.assertIsNone(result.grid)

    def test_generation_failure_is_a_server_error(self) -> None:
        result = self.service.generate_puzzle(WordSearchRequest(words=BLOCKING_WORDS[:16]))
        self.assertTrue(result.is_error)
        self.assertIn("Failed to generate grid after 5 attempts", result.error)
        self.assertEqual(result.status_code, 500)

    def test_pdf_request_returns_pdf_bytes(self) -> None:
        result = self.service.generate_puzzle(WordSearchRequest(words=["cat"], pdf=True))
        self.assertFalse(result.is_error, result.error)
        self.assertTrue(result.pdf)
        self.assertEqual(result.pdf_bytes, b"%PDF-1.4 fake")
        self.assertIsNone(result.json)
        self.json_renderer.assert_not_called()

    def test_footer_is_passed_to_pdf_renderer(self) -> None:
        request = WordSearchRequest(words=["cat"], pdf=True, footer="http://example.com/footer")
        self.service.generate_puzzle(request)
        _, pdf_config = self.pdf_renderer.call_args[0]
        self.assertEqual(pdf_config.footer, "http://example.com/footer")
        self.assertIsNone(self.service.config.pdf.footer)

    def test_pdf_renderer_failure_is_reported(self) -> None:
        self.pdf_renderer.side_effect = RenderError("boom")
        result = self.service.generate_puzzle(WordSearchRequest(words=["cat"], pdf=True))
        self.assertTrue(result.is_error)
        self.assertIn("PDF generation failed", result.error)
        self.assertEqual(result.status_code, 500)

    def test_json_renderer_failure_is_reported(self) -> None:
        self.json_renderer.side_effect = RenderError("boom")
        result = self.service.generate_puzzle(WordSearchRequest(words=["cat"]))
        self.assertTrue(result.is_error)
        self.assertIn("JSON generation failed", result.error)
        self.assertEqual(result.status_code, 500)

    def test_max_words_is_configurable(self) -> None:
        service = WordSearchService(ServiceConfig(max_words=2), json_renderer=self.json_renderer)
        result = service.generate_puzzle(WordSearchRequest(words=["a", "b", "c"]))
        self.assertIn("Maximum allowed is 2", result.error)

    def test_uncased_word_is_generated(self) -> None:
        result = self.service.generate_puzzle(WordSearchRequest(words=["猫"]))
        self.assertFalse(result.is_error, result.error)
        self.assertEqual(result.status_code, 200)
        self.assertTrue(locate_word(result.grid, "猫"))

    def test_real_renderers(self) -> None:
        service = WordSearchService()
        json_result = service.generate_puzzle(WordSearchRequest(words=["cat", "dog"]))
        self.assertEqual(json_result.json["words"], ["cat", "dog"])
        pdf_result = service.generate_puzzle(WordSearchRequest(words=["cat", "dog"], pdf=True))
        self.assertEqual(pdf_result.pdf_bytes[:5], b"%PDF-")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
