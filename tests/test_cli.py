"""Tests for the main.py command-line entry point."""

import pytest

import main


@pytest.fixture
def cli_args(site_config):
    return [
        "--site-url", site_config.site_url,
        "--content-dir", str(site_config.content_dir),
        "--output-dir", str(site_config.output_dir),
    ]


class TestGenerateCommand:
    def test_writes_artifacts(self, cli_args, site_config):
        assert main.main(cli_args + ["generate"]) == 0
        assert (site_config.output_dir / "sitemap.xml").exists()
        assert (site_config.output_dir / "robots.txt").exists()

    def test_failure_still_exits_zero(self, cli_args, site_config):
        site_config.output_dir.write_text("in the way")
        assert main.main(cli_args + ["generate"]) == 0

    def test_strict_fails_on_skipped_post(self, cli_args, write_post):
        write_post("a.md", "# Same")
        write_post("b.md", "# Same")
        assert main.main(cli_args + ["generate"]) == 0
        assert main.main(cli_args + ["generate", "--strict"]) == 1

    def test_strict_passes_clean_build(self, cli_args, write_post):
        write_post("a.md", "# Only Post")
        assert main.main(cli_args + ["generate", "--strict"]) == 0


class TestSingleArtifactCommands:
    def test_sitemap_only(self, cli_args, site_config):
        assert main.main(cli_args + ["sitemap"]) == 0
        assert (site_config.output_dir / "sitemap.xml").exists()
        assert not (site_config.output_dir / "robots.txt").exists()

    def test_robots_only(self, cli_args, site_config):
        assert main.main(cli_args + ["robots"]) == 0
        assert not (site_config.output_dir / "sitemap.xml").exists()
        robots = (site_config.output_dir / "robots.txt").read_text(encoding="utf-8")
        assert f"Sitemap: {site_config.site_url}/sitemap.xml" in robots


class TestQuoteCommand:
    def test_prints_total(self, capsys):
        assert main.main(["quote", "sports-plus"]) == 0
        out = capsys.readouterr().out
        assert "Sports Plus" in out
        assert "Total" in out

    def test_unknown_addon_exit_code(self):
        assert main.main(["quote", "nope"]) == 2

    def test_list(self, capsys):
        assert main.main(["quote", "--list"]) == 0
        assert "entertainment-plus" in capsys.readouterr().out


def test_no_command_prints_help(capsys):
    assert main.main([]) == 1
    assert "usage" in capsys.readouterr().out
