"""Unit tests for the environment file creation flow."""

import pytest

from env_creator.core.creator import CreateOutcome, EnvCreator
from env_creator.interfaces.errors import InteractiveFillError
from env_creator.strategies.ignore_files import GitignoreUpdater
from env_creator.strategies.locators import FileSystemTemplateLocator
from env_creator.strategies.template_engine import TemplateProcessor

TEMPLATE = "DB_HOST=localhost\nDB_PASSWORD=change-me\nDEBUG=true\n"


@pytest.fixture
def build_creator(editor):
    """Create an EnvCreator wired with real strategies and test doubles."""

    def _build(prompter, **kwargs):
        return EnvCreator(
            locator=FileSystemTemplateLocator(),
            processor=TemplateProcessor(),
            ignore_updater=GitignoreUpdater(prompter),
            editor=kwargs.pop("editor", editor),
            prompter=prompter,
            **kwargs,
        )

    return _build


class FailingEditor:
    """Editor whose interactive fill always fails."""

    def open(self, path):
        raise InteractiveFillError(f"Could not open {path}")

    def insert_interactive_template(self, target, snippet, stops):
        raise InteractiveFillError("terminal went away")


# =============================================================================
# Early Exit Tests
# =============================================================================


class TestEarlyExits:
    """Runs that end before anything is written."""

    def test_no_workspace(self, build_creator, make_prompter):
        """Test that a missing workspace is reported."""
        prompter = make_prompter()

        assert build_creator(prompter).run(None) is CreateOutcome.NO_WORKSPACE
        assert prompter.by_level("error") == ["No workspace folder open"]

    def test_workspace_is_not_a_directory(self, build_creator, make_prompter, tmp_path):
        """Test that a file given as workspace is reported as no workspace."""
        prompter = make_prompter()

        assert build_creator(prompter).run(tmp_path / "missing") is CreateOutcome.NO_WORKSPACE
        assert prompter.by_level("error")[0].startswith("No workspace folder open")

    def test_no_template_found(self, build_creator, make_prompter, tmp_path, write_file):
        """Test the message when no template exists."""
        write_file(tmp_path / "node_modules" / ".env.example", TEMPLATE)
        prompter = make_prompter()

        assert build_creator(prompter).run(tmp_path) is CreateOutcome.NO_TEMPLATE_FOUND
        assert prompter.by_level("error") == [
            "No .env template files found (e.g., .env.example, .env.template)"
        ]
        assert not (tmp_path / ".env").exists()
        assert not (tmp_path / ".gitignore").exists()

    def test_selection_dismissed(self, build_creator, make_prompter, tmp_path, write_file):
        """Test that dismissing the pick writes nothing."""
        write_file(tmp_path / "a" / ".env.example", TEMPLATE)
        write_file(tmp_path / "b" / ".env.sample", TEMPLATE)
        prompter = make_prompter([None])

        assert build_creator(prompter).run(tmp_path) is CreateOutcome.CANCELLED
        assert prompter.messages == []
        assert not (tmp_path / "a" / ".env").exists()
        assert not (tmp_path / "b" / ".env").exists()


# =============================================================================
# Creation Tests
# =============================================================================


class TestCreate:
    """Runs that write the target file."""

    def test_single_template_without_placeholders(self, build_creator, make_prompter, editor, tmp_path, write_file):
        """Test that a single template is used without asking."""
        content = "PORT=8080\r\nHOST=localhost\n\n# done"
        write_file(tmp_path / ".env.example", content)
        prompter = make_prompter(["No"])

        assert build_creator(prompter).run(tmp_path) is CreateOutcome.CREATED
        assert (tmp_path / ".env").read_bytes() == content.encode("utf-8")
        assert prompter.picks == []
        assert editor.inserts == []
        assert prompter.by_level("info")[0] == ".env file created successfully"

    def test_placeholders_start_interactive_fill(self, build_creator, make_prompter, editor, tmp_path, write_file):
        """Test that placeholders are handed to the editor as stops."""
        write_file(tmp_path / ".env.example", TEMPLATE)
        prompter = make_prompter(["No"])

        assert build_creator(prompter).run(tmp_path) is CreateOutcome.CREATED

        # Plain copy is written first
        assert (tmp_path / ".env").read_text(encoding="utf-8") == TEMPLATE

        (target, snippet, stops) = editor.inserts[0]
        assert target == tmp_path / ".env"
        assert snippet == "DB_HOST=localhost\nDB_PASSWORD=${1:change-me}\nDEBUG=true\n"
        assert [(s.index, s.key, s.default) for s in stops] == [(1, "DB_PASSWORD", "change-me")]

    def test_empty_template(self, build_creator, make_prompter, editor, tmp_path, write_file):
        """Test that an empty template yields an empty .env without interactive fill."""
        write_file(tmp_path / ".env.dist", "")
        prompter = make_prompter(["No"])

        assert build_creator(prompter).run(tmp_path) is CreateOutcome.CREATED
        assert (tmp_path / ".env").read_bytes() == b""
        assert editor.inserts == []

    def test_many_templates_are_picked_in_discovery_order(self, build_creator, make_prompter, tmp_path, write_file):
        """Test that several templates are offered in discovery order."""
        write_file(tmp_path / "api" / ".env.example", "API=1\n")
        write_file(tmp_path / "web" / ".env.template", "WEB=1\n")
        prompter = make_prompter([1, "No"])
        locator_order = [t.relative_path for t in FileSystemTemplateLocator().find_templates(tmp_path)]

        assert build_creator(prompter).run(tmp_path) is CreateOutcome.CREATED

        items = prompter.picks[0]
        assert [item.description for item in items] == locator_order
        assert sorted(item.label for item in items) == [".env.example", ".env.template"]

        chosen_dir = (tmp_path / locator_order[1]).parent
        other_dir = (tmp_path / locator_order[0]).parent
        assert (chosen_dir / ".env").exists()
        assert not (other_dir / ".env").exists()

    def test_target_is_next_to_template_and_gitignore_at_root(self, build_creator, make_prompter, tmp_path, write_file):
        """Test that .env lands beside the template and .gitignore at the root."""
        write_file(tmp_path / "services" / "api" / ".env.example", "A=1\n")
        prompter = make_prompter(["Yes"])

        assert build_creator(prompter).run(tmp_path) is CreateOutcome.CREATED
        assert (tmp_path / "services" / "api" / ".env").read_text(encoding="utf-8") == "A=1\n"
        assert not (tmp_path / ".env").exists()
        assert (tmp_path / ".gitignore").read_text(encoding="utf-8") == ".env\n"
        assert not (tmp_path / "services" / "api" / ".gitignore").exists()

    def test_gitignore_already_lists_env(self, build_creator, make_prompter, tmp_path, write_file):
        """Test that no question is asked when .env is already ignored."""
        write_file(tmp_path / ".env.example", "A=1\n")
        write_file(tmp_path / ".gitignore", "*.env\n")
        prompter = make_prompter()

        assert build_creator(prompter).run(tmp_path) is CreateOutcome.CREATED
        assert prompter.by_level("info") == [".env file created successfully"]
        assert (tmp_path / ".gitignore").read_text(encoding="utf-8") == "*.env\n"

    def test_custom_target_name(self, build_creator, make_prompter, tmp_path, write_file):
        """Test creating a target with a configured name."""
        write_file(tmp_path / ".env.example", "A=1\n")
        prompter = make_prompter(["No"])

        assert build_creator(prompter, target_name=".env.local").run(tmp_path) is CreateOutcome.CREATED
        assert (tmp_path / ".env.local").exists()
        assert prompter.by_level("info")[0] == ".env.local file created successfully"


# =============================================================================
# Existing Target Tests
# =============================================================================


class TestExistingTarget:
    """Runs where the target file already exists."""

    @pytest.fixture
    def workspace(self, tmp_path, write_file):
        write_file(tmp_path / ".env.example", TEMPLATE)
        write_file(tmp_path / ".env", "KEEP=me\n")
        return tmp_path

    @pytest.mark.parametrize("answer", ["Cancel", None])
    def test_cancel_leaves_file_alone(self, build_creator, make_prompter, editor, workspace, answer):
        """Test that cancel or dismissal keeps the existing file."""
        prompter = make_prompter([answer])

        assert build_creator(prompter).run(workspace) is CreateOutcome.CANCELLED
        assert (workspace / ".env").read_text(encoding="utf-8") == "KEEP=me\n"
        assert prompter.by_level("warning") == [
            ".env file already exists. Would you like to open the existing file or overwrite it?"
        ]
        assert editor.opened == []
        assert not (workspace / ".gitignore").exists()

    def test_open_existing(self, build_creator, make_prompter, editor, workspace):
        """Test that Open Existing hands the file to the editor."""
        prompter = make_prompter(["Open Existing"])

        assert build_creator(prompter).run(workspace) is CreateOutcome.OPENED_EXISTING
        assert editor.opened == [workspace / ".env"]
        assert (workspace / ".env").read_text(encoding="utf-8") == "KEEP=me\n"

    def test_overwrite(self, build_creator, make_prompter, workspace):
        """Test that Overwrite replaces the existing file."""
        prompter = make_prompter(["Overwrite", "No"])

        assert build_creator(prompter).run(workspace) is CreateOutcome.CREATED
        assert (workspace / ".env").read_text(encoding="utf-8") == TEMPLATE

    def test_open_existing_failure_is_reported(self, build_creator, make_prompter, workspace):
        """Test that an editor open failure is reported as a failure."""
        prompter = make_prompter(["Open Existing"])

        assert build_creator(prompter, editor=FailingEditor()).run(workspace) is CreateOutcome.FAILED
        assert prompter.by_level("error")[0].startswith("Failed to open .env file:")


# =============================================================================
# Failure Tests
# =============================================================================


class TestFailures:
    """Runs that hit I/O or editor errors."""

    def test_undecodable_template(self, build_creator, make_prompter, tmp_path):
        """Test that a template that is not UTF-8 fails the run."""
        (tmp_path / ".env.example").write_bytes(b"KEY=\xff\xfe\n")
        prompter = make_prompter()

        assert build_creator(prompter).run(tmp_path) is CreateOutcome.FAILED
        (message,) = prompter.by_level("error")
        assert message.startswith("Failed to create .env file: ")
        assert not (tmp_path / ".env").exists()

    def test_unwritable_target(self, build_creator, make_prompter, tmp_path, write_file):
        """Test that a target that cannot be written fails the run."""
        write_file(tmp_path / ".env.example", "A=1\n")
        (tmp_path / ".env").mkdir()
        prompter = make_prompter(["Overwrite"])

        assert build_creator(prompter).run(tmp_path) is CreateOutcome.FAILED
        (message,) = prompter.by_level("error")
        assert message.startswith("Failed to create .env file: Could not write")

    def test_editor_failure_keeps_plain_copy(self, build_creator, make_prompter, tmp_path, write_file):
        """Test that a fill failure leaves the plain copy on disk."""
        write_file(tmp_path / ".env.example", TEMPLATE)
        prompter = make_prompter()

        assert build_creator(prompter, editor=FailingEditor()).run(tmp_path) is CreateOutcome.FAILED
        assert prompter.by_level("error") == ["Failed to create .env file: terminal went away"]
        assert (tmp_path / ".env").read_text(encoding="utf-8") == TEMPLATE
        assert not (tmp_path / ".gitignore").exists()


class TestCreateOutcome:
    """Test suite for CreateOutcome."""

    def test_failure_outcomes(self):
        """Test which outcomes count as failures."""
        failures = {outcome for outcome in CreateOutcome if outcome.is_failure}
        assert failures == {
            CreateOutcome.NO_WORKSPACE,
            CreateOutcome.NO_TEMPLATE_FOUND,
            CreateOutcome.FAILED,
        }
