from datetime import datetime, timezone

import pytest

from doclogger.options import (
    LoggerOptions,
    OptionsBuilder,
    default_time_provider,
    get_global_options,
    set_global_options,
)

FIXED_TIME = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _fixed():
    return FIXED_TIME


def test_defaults(tmp_path):
    with OptionsBuilder().log_dir(tmp_path).build() as opts:
        assert opts.output_console is True
        assert opts.output_file is True
        assert opts.time_provider is default_time_provider
        assert opts.file_path.exists()


def test_default_file_name_from_time_provider(tmp_path):
    with OptionsBuilder().log_dir(tmp_path).time_provider(_fixed).build() as opts:
        assert opts.file_name == "1970-01-01_00-00-00"
        assert (tmp_path / "1970-01-01_00-00-00.log").exists()


def test_default_time_provider_is_now():
    before = datetime.now().astimezone()
    provided = default_time_provider()
    after = datetime.now().astimezone()
    assert before <= provided <= after


def test_builder(tmp_path):
    opts = (
        OptionsBuilder()
        .output_console(False)
        .output_file(False)
        .file_name("builder_test")
        .time_provider(_fixed)
        .log_dir(tmp_path)
        .build()
    )
    assert opts.output_console is False
    assert opts.output_file is False
    assert opts.file_name == "builder_test"
    assert opts.time_provider() == FIXED_TIME
    assert opts.file_stream is None
    assert list(tmp_path.iterdir()) == []


def test_previous_log(tmp_path):
    content = "This is the previous log"
    (tmp_path / "previous_test.log").write_text(content + "\n", encoding="utf-8")

    with (
        OptionsBuilder()
        .output_console(False)
        .file_name("previous_test")
        .log_dir(tmp_path)
        .build()
    ) as opts:
        previous = tmp_path / "previous_test-previous.log"
        assert previous.read_text(encoding="utf-8").splitlines()[0] == content
        assert opts.file_path.read_text(encoding="utf-8") == ""


def test_creates_missing_directory(tmp_path):
    target = tmp_path / "logs"
    with OptionsBuilder().file_name("x").log_dir(target).build() as opts:
        assert target.is_dir()
        assert opts.file_path == target / "x.log"


def test_file_stream_writes_and_close(tmp_path):
    opts = LoggerOptions(False, True, "stream", _fixed, tmp_path)
    opts.file_stream.write("hello\n")
    opts.close()
    assert opts.file_stream is None
    assert (tmp_path / "stream.log").read_text(encoding="utf-8") == "hello\n"


def test_global_options_roundtrip(tmp_path):
    opts = OptionsBuilder().output_file(False).log_dir(tmp_path).build()
    set_global_options(opts)
    assert get_global_options() is opts
    set_global_options(None)
    with pytest.raises(RuntimeError):
        get_global_options()