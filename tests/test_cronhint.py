"""Tests for the cronhint package surface."""

import cronhint
from cronhint import CommandHints, CrontabEntry, inspect_command
from cronhint.core.hints import apply_entry_metadata
from cronhint.core.log_files import LogFileExtractor
from cronhint.core.script_path import ScriptPathExtractor


class TestInspectCommand:
    """Test bundling of command hints."""

    def test_inspect_command(self):
        """All hints come from the same command."""
        hints = inspect_command("node /srv/apps/api/worker.js >> /var/log/worker.log 2>&1")

        assert hints.script_path == "/srv/apps/api/worker.js"
        assert hints.log_files == ("/var/log/worker.log",)
        assert hints.log_file == "/var/log/worker.log"
        assert hints.job_name == "apps/api/worker"

    def test_inspect_command_without_hints(self):
        """An empty command yields empty hints."""
        hints = inspect_command("")

        assert hints == CommandHints(command="", script_path=None, log_files=(), job_name="")
        assert hints.log_file is None

    def test_inspect_command_with_custom_extractors(self):
        """Injected extractors are used for every hint."""
        hints = inspect_command(
            "deno /srv/tasks/sync.ts > /dev/tty",
            script_paths=ScriptPathExtractor({"deno"}),
            log_files=LogFileExtractor({"/dev/tty"}),
        )

        assert hints.script_path == "/srv/tasks/sync.ts"
        assert hints.log_files == ()
        assert hints.job_name == "srv/tasks/sync"

    def test_to_dict(self):
        """Serialized hints include the first log file."""
        payload = inspect_command("/bin/a.sh > a.log 2> b.log").to_dict()

        assert payload["log_file"] == "a.log"
        assert payload["log_files"] == ["a.log", "b.log"]

    def test_hints_are_hashable(self):
        """Equal hints hash alike so they can be cached or put in sets."""
        first = inspect_command("/bin/a.sh > a.log")
        second = inspect_command("/bin/a.sh > a.log")

        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_entry_metadata_wins(self):
        """Explicit crontab name and log file replace the derived ones."""
        entry = CrontabEntry(
            line_number=3,
            schedule="@daily",
            command="/srv/jobs/backup.sh > /tmp/out.log",
            name="Nightly backup",
            log_file="/var/log/backup.log",
        )

        hints = apply_entry_metadata(inspect_command(entry.command), entry)

        assert hints.job_name == "Nightly backup"
        assert hints.log_files == ("/var/log/backup.log", "/tmp/out.log")
        assert hints.log_file == "/var/log/backup.log"

    def test_entry_without_metadata_keeps_hints(self):
        """Entries with no markers leave the derived hints alone."""
        hints = inspect_command("/srv/jobs/backup.sh > /tmp/out.log")
        entry = CrontabEntry(line_number=1, schedule="@daily", command=hints.command)

        assert apply_entry_metadata(hints, entry) == hints


def test_public_api() -> None:
    assert cronhint.extract_script_path("php /var/www/cron.php") == "/var/www/cron.php"
    assert cronhint.extract_log_files("php /var/www/cron.php >> cron.log") == ["cron.log"]
    assert cronhint.parse_crontab("@daily /bin/a.sh")[0].schedule == "@daily"
