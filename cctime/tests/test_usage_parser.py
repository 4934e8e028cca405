import json
import tempfile
import unittest
from datetime import datetime, timezone
from pathlib import Path

from cctime.parsers.usage import (
    extract_session_id_from_path,
    load_events,
    load_usage_file,
    parse_usage_line,
)


class UsageParserTests(unittest.TestCase):
    def _write(self, relative_path: str, lines: list[str]) -> Path:
        tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(tmpdir.cleanup)
        path = Path(tmpdir.name) / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("\n".join(lines), encoding="utf-8")
        return path

    def test_parse_usage_line_accepts_claude_records(self) -> None:
        line = json.dumps(
            {
                "timestamp": "2025-08-09T10:00:00.000Z",
                "sessionId": "abc",
                "cwd": "/home/me/project",
                "message": {
                    "role": "assistant",
                    "model": "claude-sonnet",
                    "usage": {"input_tokens": 10, "output_tokens": 20},
                    "content": [{"type": "text", "text": "hi"}],
                },
                "unknownField": {"nested": True},
            }
        )
        entry = parse_usage_line(line, Path("x.jsonl"))
        self.assertIsNotNone(entry)
        assert entry is not None
        self.assertEqual(entry.sessionId, "abc")
        self.assertEqual(entry.message.role, "assistant")
        self.assertEqual(entry.cwd, "/home/me/project")

    def test_parse_usage_line_accepts_plain_string_content(self) -> None:
        line = '{"timestamp": "2025-08-09T10:00:00Z", "message": {"role": "user", "content": "Start"}}'
        entry = parse_usage_line(line, Path("x.jsonl"))
        self.assertIsNotNone(entry)
        assert entry is not None
        self.assertEqual(entry.message.content, "Start")

    def test_parse_usage_line_skips_malformed_input(self) -> None:
        path = Path("x.jsonl")
        self.assertIsNone(parse_usage_line("invalid json line", path))
        self.assertIsNone(parse_usage_line("[1, 2]", path))
        self.assertIsNone(parse_usage_line('{"message": {"role": "user"}}', path))
        self.assertIsNone(parse_usage_line('{"timestamp": "2025-08-09 10:00"}', path))

    def test_load_usage_file_skips_blank_and_invalid_lines(self) -> None:
        path = self._write(
            "session-003/usage.jsonl",
            [
                "invalid json line",
                "",
                '{"timestamp": "2025-08-09T10:00:00.000Z", "message": {"role": "user"}}',
                "   ",
                '{"timestamp": "2025-08-09T10:01:00.000Z"}',
            ],
        )
        self.assertEqual(len(load_usage_file(path)), 2)

    def test_load_usage_file_missing_file_returns_empty(self) -> None:
        self.assertEqual(load_usage_file(Path("/nonexistent/cctime/file.jsonl")), [])

    def test_extract_session_id_from_path(self) -> None:
        self.assertEqual(extract_session_id_from_path(Path("/data/session-001/conversation.jsonl")), "session-001")
        self.assertEqual(extract_session_id_from_path(Path(".claude/abc123.jsonl")), "abc123")
        self.assertEqual(extract_session_id_from_path(Path("abc123.jsonl")), "abc123")
        self.assertEqual(extract_session_id_from_path(Path(".claude/usage.jsonl")), "unknown")
        self.assertEqual(extract_session_id_from_path(Path("chat.jsonl")), "unknown")

    def test_record_session_id_takes_precedence_over_path(self) -> None:
        path = self._write(
            "project-dir/file.jsonl",
            [
                '{"timestamp": "2025-08-09T10:00:00.000Z", "sessionId": "from-record", "message": {"role": "user"}}',
                '{"timestamp": "2025-08-09T10:01:00.000Z"}',
            ],
        )
        events = load_events(path)
        self.assertEqual([e.sessionId for e in events], ["from-record", "project-dir"])
        self.assertEqual(events[0].role, "user")
        self.assertIsNone(events[1].role)
        self.assertEqual(events[0].timestamp, datetime(2025, 8, 9, 10, 0, tzinfo=timezone.utc))
        self.assertEqual(events[0].filePath, str(path))


if __name__ == "__main__":
    unittest.main()
