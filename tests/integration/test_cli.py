"""
Integration tests for the storyscore command line.
"""

import json

from storyscore_cli import main

STORY = "As a user, I want to reset my password, so that I can regain access to my account"


class TestAnalyzeCommand:

    def test_json_to_stdout(self, capsys):
        assert main(["analyze", "--story", STORY, "--log-level", "ERROR"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["overallReadinessScore"]["readinessRating"] == 66

    def test_files_and_markdown(self, tmp_path, capsys):
        story_file = tmp_path / "story.txt"
        ac_file = tmp_path / "ac.txt"
        story_file.write_text(STORY, encoding="utf-8")
        ac_file.write_text("Given X\nWhen Y\nThen Z\n", encoding="utf-8")

        code = main([
            "analyze", "--story-file", str(story_file), "--ac-file", str(ac_file),
            "--format", "markdown", "--log-level", "ERROR",
        ])

        assert code == 0
        assert "**Readiness Rating:** 88%" in capsys.readouterr().out

    def test_output_file(self, tmp_path):
        output = tmp_path / "report.json"
        assert main(["analyze", "--story", STORY, "--output", str(output), "--log-level", "ERROR"]) == 0

        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["investCriteriaAssessment"]["totalScore"] == 41

    def test_custom_config(self, tmp_path, capsys):
        config = tmp_path / "scoring.json"
        config.write_text(json.dumps({"keywords": {"technical": ["password"]}}), encoding="utf-8")

        assert main(["analyze", "--story", STORY, "--config", str(config), "--log-level", "ERROR"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["investCriteriaAssessment"]["negotiable"]["score"] == 3

    def test_bad_config(self, tmp_path, capsys):
        config = tmp_path / "scoring.json"
        config.write_text("{broken", encoding="utf-8")

        assert main(["analyze", "--story", STORY, "--config", str(config), "--log-level", "ERROR"]) == 2
        assert "not valid JSON" in capsys.readouterr().err

    def test_story_and_story_file_conflict(self, tmp_path):
        story_file = tmp_path / "story.txt"
        story_file.write_text(STORY, encoding="utf-8")

        assert main(["analyze", "--story", STORY, "--story-file", str(story_file), "--log-level", "ERROR"]) == 2
