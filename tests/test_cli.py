"""
Tests for the command line interface.
"""

import json
import os

import pytest
from click.testing import CliRunner
from unittest.mock import patch

from cli import build_config, cli
from scenario2050.mock_narrative import mock_narrative
from scenario2050.prompts import build_prompt
from tests.conftest import make_http_response


@pytest.fixture
def runner():
    return CliRunner()


class TestBuildConfig:
    """Test turning CLI options into a configuration."""

    def test_defaults(self):
        """Test that no options give the default scenario."""
        config = build_config(None, None, ())
        assert config.climate_c == 2.2
        assert config.provider == "mock"

    def test_overrides(self):
        """Test that --set values are applied by id or attribute name."""
        config = build_config("gemini", "de", ("climateC=2.8", "tech_diffusion=10"))
        assert config.climate_c == 2.8
        assert config.tech_diffusion == 10
        assert config.language == "de"
        assert config.provider == "gemini"


class TestGenerateCommand:
    """Test the generate command."""

    def test_mock_text(self, runner):
        """Test that the mock narrative is printed."""
        result = runner.invoke(cli, ['generate', '--set', 'climateC=3.0'])
        assert result.exit_code == 0
        expected = mock_narrative(build_config(None, None, ("climateC=3.0",)))
        assert result.output.strip() == expected

    def test_json(self, runner):
        """Test the JSON output format."""
        result = runner.invoke(cli, ['generate', '--language', 'de', '--format', 'json'])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data == {"text": mock_narrative(build_config(None, "de", ()))}
        assert data["text"].startswith("Das Jahr 2050")

    def test_unknown_axis(self, runner):
        """Test that an unknown axis is a usage error."""
        result = runner.invoke(cli, ['generate', '--set', 'sunspots=3'])
        assert result.exit_code == 2
        assert "unknown axis" in result.output

    def test_malformed_override(self, runner):
        """Test that an override without '=' is a usage error."""
        result = runner.invoke(cli, ['generate', '--set', 'climateC'])
        assert result.exit_code == 2

    def test_unknown_provider(self, runner):
        """Test that provider choices are enforced."""
        result = runner.invoke(cli, ['generate', '--provider', 'anthropic'])
        assert result.exit_code == 2


class TestPromptCommand:
    """Test the prompt command."""

    def test_prints_prompt(self, runner):
        """Test that both instructions are printed."""
        result = runner.invoke(cli, ['prompt', '--language', 'de'])
        assert result.exit_code == 0
        prompt = build_prompt(build_config(None, "de", ()))
        assert prompt.system in result.output
        assert prompt.user in result.output


class TestAxesCommand:
    """Test the axes command."""

    def test_lists_axes(self, runner):
        """Test that all seven axes are listed."""
        result = runner.invoke(cli, ['axes'])
        assert result.exit_code == 0
        lines = result.output.strip().split("\n")
        assert len(lines) == 7
        assert lines[0].startswith("climateC")
        assert "Net workforce pressure index" in lines[1]


class TestTTSCommand:
    """Test the tts command."""

    def test_not_configured(self, runner, tmp_path):
        """Test that a missing key exits with code 1."""
        result = runner.invoke(cli, ['tts', '--text', 'Hello.', '--output', str(tmp_path / 'out.mp3')])
        assert result.exit_code == 1
        assert "ELEVENLABS_API_KEY" in result.output

    def test_requires_text(self, runner, tmp_path):
        """Test that text or an input file is required."""
        result = runner.invoke(cli, ['tts', '--output', str(tmp_path / 'out.mp3')])
        assert result.exit_code == 2

    def test_writes_audio(self, runner, tmp_path):
        """Test that decoded audio is written to the output file."""
        source = tmp_path / 'story.txt'
        source.write_text("A story.", encoding='utf-8')
        output = tmp_path / 'out.mp3'

        with patch.dict(os.environ, {"ELEVENLABS_API_KEY": "xi-test"}):
            with patch('scenario2050.services.speech_service.requests.post') as mock_post:
                mock_post.return_value = make_http_response(200, content=b"mp3-bytes")
                result = runner.invoke(cli, ['tts', '--input', str(source), '--output', str(output)])

        assert result.exit_code == 0
        assert output.read_bytes() == b"mp3-bytes"
        assert mock_post.call_args.kwargs["json"]["text"] == "A story."


class TestCheckCommand:
    """Test the check command."""

    def test_reports_configuration(self, runner):
        """Test that backend status is reported."""
        with patch.dict(os.environ, {"GEMINI_API_KEY": "g"}):
            result = runner.invoke(cli, ['check'])
        assert result.exit_code == 0
        assert "gemini   configured" in result.output
        assert "openai   not configured" in result.output
        assert "default provider: gemini" in result.output
