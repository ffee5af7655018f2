"""Configuration commands for issue-graph CLI."""

from cyclopts import App

from issue_graph.config import DEFAULTS, get_config

config_app = App(name="config", help="Manage configuration")

INTEGER_KEYS = frozenset({"render.max_workers"})


@config_app.command
def set(key: str, value: str, global_: bool = False) -> None:
    """Set a configuration setting.

    Args:
        key: Configuration key, e.g. output, source.path or styles.priority.Blocker
        value: Configuration value
        global_: If True, set in global config. If False, set in local config.
    """
    if key in INTEGER_KEYS and not value.isdigit():
        raise ValueError(f"{key} must be a positive integer")
    config = get_config(use_global=global_)
    config.set(key, value)
    print(f"Set {key} = {value} ({'global' if global_ else 'local'})")


@config_app.command
def unset(key: str, global_: bool = False) -> None:
    """Unset a configuration setting.

    Args:
        key: Configuration key
        global_: If True, unset from global config. If False, unset from local config.
    """
    config = get_config(use_global=global_)
    config.unset(key)
    print(f"Unset {key} ({'global' if global_ else 'local'})")


@config_app.command
def get(key: str, global_: bool = False) -> None:
    """Get the effective value of a configuration setting.

    Args:
        key: Configuration key
        global_: If True, get from global config only. If False, get with global fallback.
    """
    value = get_config(use_global=global_).get(key)
    if value is None:
        print(f"{key} is not set")
    else:
        print(f"{key} = {value}")


@config_app.command(name="list")
def list_config(global_: bool = False) -> None:
    """List configuration settings, including built-in defaults that are not overridden.

    Args:
        global_: If True, list global config only. If False, list merged config.
    """
    settings = get_config(use_global=global_).list()

    print("Settings:\n")
    for key, value in settings.items():
        print(f"{key} = {value}")
    for key, value in DEFAULTS.items():
        if key not in settings:
            print(f"{key} = {value} (default)")


@config_app.command
def styles() -> None:
    """Show the effective status colors, type styles and priority glyphs."""
    rules = get_config().styles()

    print("Status colors:")
    for name, color in rules.status_colors.items():
        print(f"  {name}: {color}")
    print("Types:")
    for name, style in rules.type_styles.items():
        print(f"  {name}: {style.label} {style.color}")
    print("Priorities:")
    for name, glyph in rules.priority_glyphs.items():
        print(f"  {name}: {glyph}")
