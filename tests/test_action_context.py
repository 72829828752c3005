import io
import json
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest.mock import patch

from domain.errors import ConfigurationError
from domain.models import IssueContext, RepositoryRef
from infrastructure.actions.context import (
    load_action_context,
    load_event_payload,
    parse_repository_slug,
)


class ParseRepositorySlugTests(unittest.TestCase):
    def test_splits_owner_and_name(self) -> None:
        self.assertEqual(parse_repository_slug("acme/widgets"), RepositoryRef("acme", "widgets"))

    def test_rejects_malformed_slug(self) -> None:
        for slug in ("acme", "acme/", "/widgets", "acme/widgets/extra"):
            with self.subTest(slug=slug):
                with self.assertRaises(ConfigurationError):
                    parse_repository_slug(slug)


class LoadActionContextTests(unittest.TestCase):
    def _write_event(self, directory: str, payload: dict[str, object]) -> str:
        event_path = Path(directory) / "event.json"
        event_path.write_text(json.dumps(payload), encoding="utf-8")
        return str(event_path)

    def test_reads_issue_event(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_directory:
            event_path = self._write_event(
                tmp_directory,
                {"action": "opened", "issue": {"number": 42, "title": "Bug", "user": {"login": "x"}}},
            )
            context = load_action_context(
                {
                    "GITHUB_EVENT_NAME": "issues",
                    "GITHUB_SHA": "abc123",
                    "GITHUB_REF": "refs/heads/main",
                    "GITHUB_REPOSITORY": "acme/widgets",
                    "GITHUB_EVENT_PATH": event_path,
                    "GITHUB_RUN_ID": "987",
                }
            )

        self.assertEqual(context.event_name, "issues")
        self.assertEqual(context.sha, "abc123")
        self.assertEqual(context.repository, RepositoryRef("acme", "widgets"))
        self.assertEqual(context.issue, IssueContext(number=42))
        self.assertEqual(context.run_id, "987")

    def test_push_event_has_no_issue(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_directory:
            event_path = self._write_event(
                tmp_directory,
                {"ref": "refs/heads/issue-42", "after": "def456", "commits": []},
            )
            context = load_action_context(
                {
                    "GITHUB_EVENT_NAME": "push",
                    "GITHUB_SHA": "def456",
                    "GITHUB_REF": "refs/heads/issue-42",
                    "GITHUB_REPOSITORY": "acme/widgets",
                    "GITHUB_EVENT_PATH": event_path,
                }
            )

        self.assertIsNone(context.issue)
        self.assertEqual(context.ref, "refs/heads/issue-42")
        self.assertIsNone(context.run_id)

    def test_payload_ref_is_used_when_runner_ref_is_absent(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_directory:
            event_path = self._write_event(tmp_directory, {"ref": "refs/heads/issue-7"})
            context = load_action_context(
                {
                    "GITHUB_EVENT_NAME": "push",
                    "GITHUB_REPOSITORY": "acme/widgets",
                    "GITHUB_EVENT_PATH": event_path,
                }
            )

        self.assertEqual(context.ref, "refs/heads/issue-7")

    def test_missing_repository_is_a_configuration_error(self) -> None:
        with self.assertRaises(ConfigurationError):
            load_action_context({"GITHUB_EVENT_NAME": "push"})

    def test_missing_event_file_yields_empty_payload_with_warning(self) -> None:
        output = io.StringIO()
        with redirect_stdout(output):
            payload = load_event_payload("/nonexistent/event.json")

        self.assertIsNone(payload.issue)
        self.assertIn("::warning::GITHUB_EVENT_PATH /nonexistent/event.json does not exist", output.getvalue())

    def test_invalid_event_file_is_a_configuration_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_directory:
            event_path = Path(tmp_directory) / "event.json"
            event_path.write_text("not json", encoding="utf-8")

            with self.assertRaises(ConfigurationError):
                load_event_payload(str(event_path))

    def test_undecodable_event_file_is_a_configuration_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_directory:
            event_path = Path(tmp_directory) / "event.json"
            event_path.write_bytes(b"{\"ref\": \"\xff\xfe\"}")

            with self.assertRaises(ConfigurationError) as raised_error:
                load_event_payload(str(event_path))

        self.assertIn("Unreadable event payload", str(raised_error.exception))

    def test_unreadable_event_path_is_a_configuration_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_directory:
            event_path = Path(tmp_directory) / "event.json"
            event_path.write_text("{}", encoding="utf-8")

            with patch.object(Path, "read_text", side_effect=PermissionError("denied")):
                with self.assertRaises(ConfigurationError):
                    load_event_payload(str(event_path))


if __name__ == "__main__":
    unittest.main()
