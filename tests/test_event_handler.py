import base64
import json
import unittest

from wordsearch.io.event_handler import extract_request, handle_event, parse_flag, parse_words


class EventParsingTests(unittest.TestCase):
    def test_parse_words_splits_and_trims(self) -> None:
        self.assertEqual(parse_words(" apple, banana ,,cherry "), ["apple", "banana", "cherry"])
        self.assertEqual(parse_words(["apple", "banana"]), ["apple", "banana"])
        self.assertEqual(parse_words(""), [])

    def test_parse_flag(self) -> None:
        self.assertTrue(parse_flag(True))
        self.assertTrue(parse_flag("true"))
        self.assertTrue(parse_flag("TRUE"))
        self.assertFalse(parse_flag("false"))
        self.assertFalse(parse_flag(None))

    def test_query_parameters_take_precedence_over_body(self) -> None:
        event = {
            "queryStringParameters": {"words": "apple", "pdf": "true"},
            "body": {"words": ["banana"]},
        }
        self.assertEqual(extract_request(event), (["apple"], True, None))

    def test_body_json_string_is_decoded(self) -> None:
        event = {"body": json.dumps({"words": ["apple"], "footerUrl": "http://x"})}
        self.assertEqual(extract_request(event), (["apple"], False, "http://x"))

    def test_non_json_body_string_is_ignored(self) -> None:
        self.assertEqual(extract_request({"body": "not json"}), (None, False, None))


class HandleEventTests(unittest.TestCase):
    def test_json_response(self) -> None:
        response = handle_event({"body": {"words": "apple,banana,cherry", "pdf": False}})
        self.assertEqual(response["statusCode"], 200)
        self.assertIn("application/json", response["headers"]["Content-Type"])
        self.assertFalse(response["isBase64Encoded"])
        body = json.loads(response["body"])
        self.assertIn("grid", body)
        self.assertEqual(body["words"], ["apple", "banana", "cherry"])

    def test_pdf_response_is_base64(self) -> None:
        response = handle_event({"body": {"words": "apple,banana,cherry", "pdf": True}})
        self.assertEqual(response["statusCode"], 200)
        self.assertIn("application/pdf", response["headers"]["Content-Type"])
        self.assertIn("wordsearch.pdf", response["headers"]["Content-Disposition"])
        self.assertTrue(response["isBase64Encoded"])
        pdf_bytes = base64.b64decode(response["body"])
        self.assertGreater(len(pdf_bytes), 100)
        self.assertEqual(pdf_bytes[:5], b"%PDF-")

    def test_missing_words(self) -> None:
        for event in ({"body": {"pdf": False}}, {"queryStringParameters": {"pdf": False}}, {}):
            with self.subTest(event=event):
                response = handle_event(event)
                self.assertEqual(response["statusCode"], 400)
                self.assertIn("No words provided", response["body"])

    def test_query_string_parameters(self) -> None:
        response = handle_event({"queryStringParameters": {"words": "apple,banana"}})
        self.assertEqual(response["statusCode"], 200)
        self.assertIn("apple", response["body"])
        self.assertIn("banana", response["body"])

    def test_word_too_long_is_400(self) -> None:
        response = handle_event({"body": {"words": ["abcdefghijklmnopqrstuvwxyzabcde"]}})
        self.assertEqual(response["statusCode"], 400)
        self.assertIn("exceeds", json.loads(response["body"])["error"])

    def test_too_many_words_is_400(self) -> None:
        words = ",".join(f"word{i}" for i in range(21))
        response = handle_event({"queryStringParameters": {"words": words}})
        self.assertEqual(response["statusCode"], 400)
        self.assertIn("Too many words", response["body"])

    def test_blank_words_string_is_400(self) -> None:
        response = handle_event({"queryStringParameters": {"words": " , "}})
        self.assertEqual(response["statusCode"], 400)
        self.assertIn("empty", response["body"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
