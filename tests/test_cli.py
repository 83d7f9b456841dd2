from stringext.cli.app import app

VIDEO_ID = "dQw4w9WgXcQ"


class TestTextCommands:
    def test_strip_keeps_formatting(self, runner):
        result = runner.invoke(app, ["strip", "<div><p>Hi <b>there</b></p></div>"])
        assert result.exit_code == 0
        assert result.output.strip() == "<p>Hi <b>there</b></p>"

    def test_strip_all(self, runner):
        result = runner.invoke(app, ["strip", "--all", "<div><p>Hi <b>there</b></p></div>"])
        assert result.output.strip() == "Hi there"

    def test_strip_keep_extra_tag(self, runner):
        result = runner.invoke(app, ["strip", "--no-paragraphs", "--keep", "div", "<div><p>Hi</p></div>"])
        assert result.output.strip() == "<div>Hi</div>"

    def test_shorten(self, runner):
        result = runner.invoke(
            app, ["shorten", "<p>Hello <em>wonderful</em> world of tests</p>", "--length", "10"]
        )
        assert result.exit_code == 0
        assert "<p>Hello <em>wonderful</em>...</p>" in result.output

    def test_shorten_uses_configured_ellipsis(self, runner, project_dir):
        (project_dir / "config" / "default.yaml").write_text("shorten:\n  ellipsis: ' >>'\n")
        result = runner.invoke(app, ["shorten", "<p>one two three four</p>", "-l", "7"])
        assert "<p>one two >></p>" in result.output

    def test_reads_stdin(self, runner):
        result = runner.invoke(app, ["invert", "-"], input="Hello")
        assert result.output.strip() == "hELLO"

    def test_count(self, runner):
        result = runner.invoke(app, ["count", "one two. three!"])
        assert result.output.strip() == "3"

    def test_sentence_and_paragraph(self, runner):
        html = "<p>One. Two.</p><p>Three.</p>"
        assert runner.invoke(app, ["sentence", html, "1"]).output.strip() == "Two."
        assert runner.invoke(app, ["paragraph", html, "1"]).output.strip() == "<p>Three.</p>"

    def test_highlight(self, runner):
        result = runner.invoke(app, ["highlight", "Python rocks", "python", "--class-name", "hl"])
        assert result.output.strip() == '<span class="hl">Python</span> rocks'

    def test_truncate_and_diacritics(self, runner):
        assert runner.invoke(app, ["truncate", "The quick brown fox", "-l", "12"]).output.strip() == "The quick..."
        assert runner.invoke(app, ["diacritics", "Crème brûlée"]).output.strip() == "Creme brulee"


class TestYouTubeCommands:
    def test_id(self, runner):
        result = runner.invoke(app, ["youtube", "id", f"https://www.youtube.com/watch?v={VIDEO_ID}"])
        assert result.exit_code == 0
        assert result.output.strip() == VIDEO_ID

    def test_id_not_found(self, runner):
        result = runner.invoke(app, ["youtube", "id", "https://example.com/"])
        assert result.exit_code == 1

    def test_embed(self, runner):
        result = runner.invoke(app, ["youtube", "embed", VIDEO_ID, "--width", "640", "--no-rel"])
        assert result.exit_code == 0
        assert 'width="640"' in result.output
        assert 'height="315"' in result.output
        assert f"{VIDEO_ID}?rel=0" in result.output

    def test_embed_invalid(self, runner):
        assert runner.invoke(app, ["youtube", "embed", "bad"]).exit_code == 1

    def test_thumbnail(self, runner):
        result = runner.invoke(app, ["youtube", "thumbnail", VIDEO_ID, "--index", "2"])
        assert result.output.strip() == f"https://i.ytimg.com/vi/{VIDEO_ID}/2.jpg"


class TestConfigCommand:
    def test_show(self, runner):
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "shorten" in result.output
        assert "ellipsis" in result.output
