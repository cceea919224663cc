from common.file_utils import append_line_if_missing, profile_contains_line
from installer.config_models import AppSettings

SHELLENV_LINE = 'eval "$(/opt/homebrew/bin/brew shellenv)"'


def test_append_creates_missing_file(tmp_path):
    profile = tmp_path / "nested" / ".zprofile"

    result = append_line_if_missing(profile, SHELLENV_LINE, AppSettings())

    assert result is True
    assert profile.read_text(encoding="utf-8") == SHELLENV_LINE + "\n"


def test_append_is_idempotent(tmp_path):
    profile = tmp_path / ".zprofile"
    app_settings = AppSettings()

    first = append_line_if_missing(profile, SHELLENV_LINE, app_settings)
    second = append_line_if_missing(profile, SHELLENV_LINE, app_settings)

    assert first is True
    assert second is False
    assert profile.read_text(encoding="utf-8").count(SHELLENV_LINE) == 1


def test_append_detects_line_embedded_in_existing_text(tmp_path):
    """An existing line that merely contains the text counts as present."""
    profile = tmp_path / ".zprofile"
    profile.write_text(f"# added by hand\n{SHELLENV_LINE} # brew\n", encoding="utf-8")

    assert append_line_if_missing(profile, SHELLENV_LINE, AppSettings()) is False


def test_append_adds_newline_before_unterminated_last_line(tmp_path):
    profile = tmp_path / ".zprofile"
    profile.write_text("export EDITOR=vim", encoding="utf-8")

    append_line_if_missing(profile, SHELLENV_LINE, AppSettings())

    assert profile.read_text(encoding="utf-8") == (
        f"export EDITOR=vim\n{SHELLENV_LINE}\n"
    )


def test_append_returns_none_on_os_error(mocker, tmp_path):
    mocker.patch(
        "common.file_utils.profile_contains_line",
        side_effect=PermissionError("denied"),
    )
    mock_log = mocker.patch("common.file_utils.log_provisioner")

    result = append_line_if_missing(
        tmp_path / ".zprofile", SHELLENV_LINE, AppSettings()
    )

    assert result is None
    mock_log.assert_called_once_with(
        mocker.ANY, "error", mocker.ANY, mocker.ANY
    )


def test_append_returns_none_on_undecodable_profile(tmp_path):
    profile = tmp_path / ".zprofile"
    profile.write_bytes(b"# caf\xe9\n")

    result = append_line_if_missing(profile, SHELLENV_LINE, AppSettings())

    assert result is None
    assert profile.read_bytes() == b"# caf\xe9\n"


def test_profile_contains_line_missing_file(tmp_path):
    assert profile_contains_line(tmp_path / "absent", SHELLENV_LINE) is False
