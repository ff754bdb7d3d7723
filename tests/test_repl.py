import io

from rich.console import Console

from conftest import make_app, output
from lunaro.models import LaunchStatus
from lunaro.repl import bootstrap, dispatch, launch_request, run_repl


def test_discord_igpu_root_scenario(session, apps_dir, spawned):
    app = make_app(apps_dir, "Discord.AppImage")

    result = launch_request(session, "discord -igpu -r")

    assert result.status is LaunchStatus.LAUNCHED
    assert result.gpu_label == "iGPU"
    assert result.elevated is True
    assert result.log_file is None
    (call,) = spawned
    assert call.cmd == ["sudo", "-E", str(app), "--no-sandbox"]
    assert call.kwargs["env"]["DRI_PRIME"] == "0"


def test_launch_status_line(session, apps_dir, spawned):
    make_app(apps_dir, "Discord.AppImage")
    assert dispatch(session, "discord -igpu -r") is True
    assert "Launched: Discord.AppImage with iGPU (root + --no-sandbox)" in output(session.console)


def test_logged_launch_prints_log_file(session, apps_dir, spawned):
    make_app(apps_dir, "LunarMC.AppImage")
    dispatch(session, "lunarmc -lr")
    text = output(session.console)
    assert "Logging to: " in text
    assert str(session.config.log_dir / "LunarMC_") in text
    assert "Launched: LunarMC.AppImage with dGPU (root + --no-sandbox)" in text


def test_default_gpu_comes_from_config(session, apps_dir, spawned):
    from dataclasses import replace

    make_app(apps_dir, "Discord.AppImage")
    session.config = replace(session.config, default_gpu="igpu")
    dispatch(session, "Discord")
    assert "with iGPU" in output(session.console)
    assert spawned[0].cmd == [str(apps_dir / "Discord.AppImage")]


def test_ghost_is_not_found_and_nothing_spawns(session, spawned):
    assert dispatch(session, "ghost") is True
    text = output(session.console)
    assert "Error: App not found: ghost" in text
    assert "Use 'list' to see available apps" in text
    assert 'Use the command "help" for more info' in text
    assert spawned == []


def test_list_scenario(session, apps_dir):
    make_app(apps_dir, "Discord.AppImage")
    make_app(apps_dir, "LunarMC.AppImage")
    session.favorites.path.write_text("Discord\n", encoding="utf-8")
    session.favorites = type(session.favorites).load(session.favorites.path)

    dispatch(session, "list")

    text = output(session.console)
    favs, _, all_apps = text.partition("ALL APPS:")
    assert "FAVORITES:" in favs
    assert "  Discord" in favs
    assert "LunarMC" not in favs
    assert "LunarMC" in all_apps
    assert "Discord" not in all_apps


def test_list_hides_stale_and_duplicate_favorites(session, apps_dir):
    make_app(apps_dir, "Discord.AppImage")
    session.favorites.path.write_text("Deleted\nDiscord\nDiscord\n", encoding="utf-8")
    session.favorites = type(session.favorites).load(session.favorites.path)

    dispatch(session, "list")

    favs = output(session.console).partition("ALL APPS:")[0]
    assert "Deleted" not in favs
    assert favs.count("Discord") == 1
    assert "Deleted" in session.favorites


def test_list_empty_and_missing_directory(session, tmp_path):
    dispatch(session, "list")
    assert "(none found)" in output(session.console)

    session.config = type(session.config)(
        appimage_dir=tmp_path / "gone", log_dir=tmp_path, default_gpu="dgpu",
    )
    dispatch(session, "list")
    assert "Directory does not exist" in output(session.console)


def test_fav_stores_on_disk_spelling(session, apps_dir):
    make_app(apps_dir, "LunarMC.AppImage")
    dispatch(session, "fav lunarmc")
    assert session.favorites.names == ["LunarMC"]
    assert "Added 'LunarMC' to favorites" in output(session.console)
    assert session.favorites.path.read_text(encoding="utf-8") == "LunarMC\n"


def test_fav_twice_reports_already_a_favorite(session, apps_dir):
    make_app(apps_dir, "Discord.AppImage")
    dispatch(session, "fav Discord")
    dispatch(session, "fav DISCORD")
    assert "'Discord' is already in favorites" in output(session.console)
    assert session.favorites.names == ["Discord"]


def test_fav_unknown_app(session):
    dispatch(session, "fav Ghost")
    assert "Error: App not found: Ghost" in output(session.console)
    assert len(session.favorites) == 0


def test_unfav(session, apps_dir):
    make_app(apps_dir, "Discord.AppImage")
    dispatch(session, "fav Discord")
    dispatch(session, "unfav Discord")
    assert "Removed 'Discord' from favorites" in output(session.console)
    assert session.favorites.names == []


def test_unfav_absent_reports_not_a_favorite(session):
    session.favorites.add("Discord")
    dispatch(session, "unfav Zoom")
    assert "'Zoom' is not in favorites" in output(session.console)
    assert session.favorites.names == ["Discord"]


def test_fav_without_name_prints_usage(session):
    dispatch(session, "fav")
    dispatch(session, "unfav   ")
    text = output(session.console)
    assert "Usage: fav <appname>" in text
    assert "Usage: unfav <appname>" in text


def test_help_shows_configuration(session):
    dispatch(session, "help")
    text = output(session.console)
    assert "-lr/-rl" in text
    assert f"App directory: {session.config.appimage_dir}" in text
    assert "Default GPU: dgpu" in text


def test_keywords_are_case_sensitive(session, spawned):
    dispatch(session, "LIST")
    assert "App not found: LIST" in output(session.console)


def test_exit_and_blank_lines(session):
    assert dispatch(session, "") is True
    assert dispatch(session, "   ") is True
    assert dispatch(session, "exit") is False
    assert dispatch(session, "quit") is False


def test_unexpected_errors_do_not_end_the_session(session, apps_dir, monkeypatch):
    make_app(apps_dir, "Discord.AppImage")

    def explode(*args, **kwargs):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr("lunaro.repl.launch_app", explode)
    assert dispatch(session, "discord") is True
    assert "Error: disk on fire" in output(session.console)


def test_run_repl_until_exit(session, apps_dir, spawned):
    make_app(apps_dir, "Discord.AppImage")
    lines = iter(["", "discord", "ghost", "exit", "discord"])

    run_repl(session, read_line=lambda prompt: next(lines))

    text = output(session.console)
    assert text.startswith("Lunaro started.")
    assert text.rstrip().endswith("Lunaro exited.")
    assert len(spawned) == 1


def test_run_repl_stops_at_end_of_input(session):
    def eof(prompt):
        raise EOFError

    run_repl(session, read_line=eof)
    assert "Lunaro exited." in output(session.console)


def test_bootstrap_materializes_defaults(home):
    console = Console(file=io.StringIO(), width=300)
    session = bootstrap(console=console, configure_logging=False)

    assert "Created default config at:" in console.file.getvalue()
    assert session.config.appimage_dir == home / "pwogams"
    assert session.config.log_dir == home / "lunarologs"
    assert session.config.default_gpu == "dgpu"
    assert (home / "pwogams").is_dir()
    assert (home / "lunarologs").is_dir()
    assert session.paths.favorites_file.exists()

    again = Console(file=io.StringIO(), width=300)
    reloaded = bootstrap(console=again, configure_logging=False)
    assert "Created default config" not in again.file.getvalue()
    assert reloaded.config == session.config


def test_log_file_is_announced_before_the_spawn(session, apps_dir, monkeypatch):
    make_app(apps_dir, "LunarMC.AppImage")
    seen_at_spawn = []

    class Snapshot:
        pid = 1

        def __init__(self, cmd, **kwargs):
            seen_at_spawn.append(output(session.console))

    monkeypatch.setattr("lunaro.launcher.subprocess.Popen", Snapshot)
    dispatch(session, "LunarMC -l")

    (before,) = seen_at_spawn
    assert "Logging to: " in before
    assert "Launched:" not in before
    text = output(session.console)
    assert text.index("Logging to: ") < text.index("Launched: LunarMC.AppImage with dGPU")
    assert text.count("Logging to: ") == 1


def test_favorites_header_shown_even_when_all_favorites_are_stale(session, apps_dir):
    make_app(apps_dir, "LunarMC.AppImage")
    session.favorites.path.write_text("Deleted\n", encoding="utf-8")
    session.favorites = type(session.favorites).load(session.favorites.path)

    dispatch(session, "list")

    favs, _, all_apps = output(session.console).partition("ALL APPS:")
    assert "FAVORITES:" in favs
    assert "Deleted" not in favs
    assert "LunarMC" in all_apps


def test_no_favorites_header_without_favorites(session, apps_dir):
    make_app(apps_dir, "LunarMC.AppImage")
    dispatch(session, "list")
    assert "FAVORITES:" not in output(session.console)


def test_bootstrap_survives_uncreatable_app_dir(home, spawned):
    blocker = home / "afile"
    blocker.write_text("not a directory", encoding="utf-8")
    config_file = home / "lunaroconf" / "config"
    config_file.parent.mkdir()
    config_file.write_text(f"APPIMAGE_DIR={blocker}/apps\n", encoding="utf-8")

    console = Console(file=io.StringIO(), width=300)
    session = bootstrap(console=console, configure_logging=False)

    assert session.config.appimage_dir == blocker / "apps"
    assert f"Error: Cannot create directory {blocker / 'apps'}" in console.file.getvalue()
    # the other dirs are still created
    assert session.config.log_dir.is_dir()

    assert dispatch(session, "list") is True
    assert "Directory does not exist" in console.file.getvalue()
    dispatch(session, "discord")
    assert "App not found: discord" in console.file.getvalue()
    assert spawned == []
