import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from hensei import cli


class FakeTools:
    """Stands in for the external tools, recording every command."""

    def __init__(self, tskm_status=0):
        self.calls = []
        self.tskm_status = tskm_status

    def __call__(self, args, **kwargs):
        self.calls.append(list(args))
        if args[0] == cli.ANALYSIS:
            Path(args[2], Path(args[1]).stem + "_Loudness").write_text("1\n")
            return subprocess.CompletedProcess(args, 0)
        if args[0] == cli.SEGMENTATION:
            Path(args[3], Path(args[1]).name + ".int").write_text(
                "0.5\t0\t10\n0.25\t10\t20\n"
            )
            return subprocess.CompletedProcess(args, 0)
        return subprocess.CompletedProcess(args, self.tskm_status)


@pytest.fixture
def audio_dir(tmp_path):
    folder = tmp_path / "songs"
    folder.mkdir()
    (folder / "song.wav").write_text("")
    (folder / "notes.txt").write_text("")
    return folder


def test_run_pipeline_runs_all_steps(audio_dir, tmp_path):
    tools = FakeTools()
    output = tmp_path / "out"
    with patch("hensei.cli.subprocess.run", side_effect=tools):
        result = cli.run_pipeline(audio_dir, output)
    assert result == output
    assert output.is_dir()
    programs = [call[0] for call in tools.calls]
    assert programs == [cli.ANALYSIS, cli.SEGMENTATION, cli.TSKM]
    tone_dir = f"{audio_dir}_tones/"
    assert tools.calls[-1] == [cli.TSKM, tone_dir, str(output)]
    assert tools.calls[1][2] == cli.SEGMENT_COUNT
    tones = Path(tone_dir, "song_Loudness.int")
    assert tones.read_text() == "1\t0\t10\n0\t10\t20\n"
    assert Path(f"{tones}.tskm").exists()


def test_run_pipeline_default_output(audio_dir):
    tools = FakeTools()
    with patch("hensei.cli.subprocess.run", side_effect=tools):
        result = cli.run_pipeline(audio_dir, None)
    assert result == Path(f"{audio_dir}_results/")
    assert tools.calls[-1][2] == f"{audio_dir}_results/"


def test_run_pipeline_missing_input(tmp_path):
    with pytest.raises(FileNotFoundError):
        cli.run_pipeline(tmp_path / "nowhere", None)


def test_run_pipeline_tskm_failure(audio_dir):
    tools = FakeTools(tskm_status=1)
    with patch("hensei.cli.subprocess.run", side_effect=tools):
        with pytest.raises(cli.PipelineError):
            cli.run_pipeline(audio_dir, None)


def test_main_without_arguments_prints_usage(capsys):
    assert cli.main([]) == 1
    assert "Usage" in capsys.readouterr().out


def test_main_missing_input(tmp_path):
    assert cli.main([str(tmp_path / "nowhere")]) == 1


def test_main_success(audio_dir, tmp_path):
    tools = FakeTools()
    with patch("hensei.cli.subprocess.run", side_effect=tools):
        status = cli.main([str(audio_dir), str(tmp_path / "res")])
    assert status == 0
    assert (tmp_path / "res").is_dir()


def test_main_tskm_failure(audio_dir):
    tools = FakeTools(tskm_status=2)
    with patch("hensei.cli.subprocess.run", side_effect=tools):
        assert cli.main([str(audio_dir)]) == 1