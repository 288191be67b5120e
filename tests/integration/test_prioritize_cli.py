"""
Integration tests for the prioritize command line against an in-memory world.
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from prioritizer.cli import app, run_command
from prioritizer.contexts.host import attach_world, get_world

FIXTURES = Path(__file__).resolve().parents[1] / "fixtures"

runner = CliRunner()


@pytest.fixture
def attached(world):
    return attach_world(world)


def invoke(*args):
    return runner.invoke(app, list(args))


@pytest.mark.integration
@pytest.mark.parametrize("help_args", [["-h"], ["--help"], ["help"], ["-a", "help", "BuildA"]])
def test_help(attached, seed, help_args):
    postings = seed("BuildA")
    result = invoke(*help_args)

    assert result.exit_code == 0
    assert "--add" in result.output
    assert "--registry" in result.output
    # Help exits before any action
    assert not postings[0].job.flags.do_now


@pytest.mark.integration
def test_status_when_nothing_watched(attached):
    result = invoke()
    assert result.exit_code == 0
    assert result.output.strip() == "Not automatically prioritizing any jobs."


@pytest.mark.integration
def test_boost_without_flags(attached, seed):
    seed("DestroyB", 2)
    result = invoke("DestroyB")

    assert result.exit_code == 0
    assert "Prioritized 2 jobs." in result.output
    assert invoke().output.strip() == "Not automatically prioritizing any jobs."


@pytest.mark.integration
def test_watch_survives_between_invocations(attached, world, seed):
    seed("BuildA", 3)

    result = invoke("-a", "BuildA", "DestroyB")
    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "Prioritized 3 jobs.",
        "Automatically prioritizing future jobs of type: BuildA",
        "Automatically prioritizing future jobs of type: DestroyB",
    ]

    job = world.post_job("BuildA")
    assert job.flags.do_now

    result = invoke()
    assert result.output.splitlines() == [
        "Automatically prioritized jobs:",
        "1\tBuildA",
        "0\tDestroyB",
    ]


@pytest.mark.integration
def test_delete_and_unload(attached, world):
    invoke("--add", "BuildA", "HaulC")

    result = invoke("--delete", "HaulC", "Dig")
    assert result.output.splitlines() == [
        "No longer automatically prioritizing jobs of type: HaulC",
        "Skipping unwatched type: Dig",
    ]

    world.unload()
    assert invoke().output.strip() == "Not automatically prioritizing any jobs."
    assert not world.post_job("BuildA").flags.do_now


@pytest.mark.integration
def test_unknown_job_type_is_reported_and_skipped(attached, seed):
    postings = seed("BuildA")
    result = invoke("-q", "Bogus", "BuildA")

    assert result.exit_code == 0
    assert 'Ignoring unknown job type: "Bogus"' in result.output
    assert "Prioritized" not in result.output
    assert postings[0].job.flags.do_now


@pytest.mark.integration
def test_jobs_view(attached, seed):
    seed("HaulC", 2)
    seed("BuildA", dead=True)

    assert invoke("-j").output.splitlines() == ["Current job counts by type:", "2\tHaulC"]
    assert invoke("-j", "BuildA").output.strip() == "No current jobs."


@pytest.mark.integration
def test_registry_view(attached):
    result = invoke("-r")
    assert result.output.splitlines() == [
        "Valid job types:",
        "  BuildA",
        "  DestroyB",
        "  HaulC",
        "  Dig",
    ]


@pytest.mark.integration
def test_last_action_flag_wins(attached, seed):
    seed("BuildA", 2)

    result = invoke("-j", "-a", "BuildA")
    assert result.exit_code == 0
    assert result.output.splitlines()[0] == "Prioritized 2 jobs."
    assert "Automatically prioritizing future jobs of type: BuildA" in result.output

    result = invoke("-a", "-j", "BuildA")
    assert result.output.splitlines() == ["Current job counts by type:", "2\tBuildA"]

    result = invoke("-a", "-d", "BuildA")
    assert result.output.strip() == "No longer automatically prioritizing jobs of type: BuildA"


@pytest.mark.integration
def test_world_from_snapshot(monkeypatch):
    monkeypatch.setenv("PRIORITIZER_WORLD", str(FIXTURES / "world_snapshot.yaml"))

    result = invoke("ConstructBuilding", "DestroyBuilding")
    assert result.exit_code == 0
    # The DestroyBuilding job in the snapshot is already flagged
    assert "Prioritized 2 jobs." in result.output
    assert len(get_world().postings) == 5


class TestRunCommand:
    """Tests for the in-process entry point used by an embedding host."""

    def test_returns_exit_code_and_prints(self, attached, seed, capsys):
        seed("BuildA")
        assert run_command(["-a", "BuildA"]) == 0
        assert "Prioritized 1 job." in capsys.readouterr().out

    def test_help_does_not_exit_process(self, attached, capsys):
        assert run_command(["--help"]) == 0
        assert "--delete" in capsys.readouterr().out

    @pytest.mark.parametrize("bad_option", ["--bogus", "-x"])
    def test_usage_error_returns_exit_code(self, attached, capsys, bad_option):
        assert run_command([bad_option]) == 2
        assert bad_option in capsys.readouterr().err

    def test_watch_state_survives_usage_error(self, attached, world):
        assert run_command(["-a", "BuildA"]) == 0
        assert run_command(["-x"]) == 2
        assert world.post_job("BuildA").flags.do_now

    def test_unknown_job_type_goes_to_stderr(self, attached, capsys):
        assert run_command(["Bogus"]) == 0
        captured = capsys.readouterr()
        assert 'Ignoring unknown job type: "Bogus"' in captured.err
        assert captured.out.strip() == "Not automatically prioritizing any jobs."
