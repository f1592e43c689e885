"""
openai-api config commands - init, show, set.
"""

import json

from openai_api.config import (
    CONFIG_FIELDS,
    ConfigFileManager,
    Defaults,
    get_config_path,
    reload_defaults,
)
from openai_api.errors import ConfigError


SECRET_FIELDS = ("api_key", "organization_key")


def cmd_config_init(args):
    """Write a config file template with ${ENV_VAR} placeholders."""
    manager = ConfigFileManager(get_config_path())

    if manager.exists() and not args.force:
        print(f"✗ Config already exists at: {manager.config_path}")
        print("  Use --force to overwrite")
        return 1

    manager.save(Defaults.template())
    print(f"✓ Created config at: {manager.config_path}")

    defaults = reload_defaults()
    print("\nCredentials:")
    for field in SECRET_FIELDS:
        status = "✓ configured" if getattr(defaults, field) else "○ not set"
        print(f"  {field}: {status}")
    return 0


def cmd_config_show(args):
    """Show the resolved process-wide defaults."""
    try:
        defaults = reload_defaults()
    except ConfigError as e:
        print(f"✗ {e}")
        return 1

    data = defaults.model_dump()
    if not args.reveal_keys:
        for field in SECRET_FIELDS:
            data[field] = _mask_key(data[field])

    if args.json:
        print(json.dumps(data, indent=2, default=str))
        return 0

    manager = ConfigFileManager(get_config_path())
    source = manager.config_path if manager.exists() else "(environment only)"

    print(f"\n📋 openai-api defaults")
    print(f"   Source: {source}\n")
    for field in CONFIG_FIELDS:
        value = data[field]
        print(f"  {field}: {value if value not in (None, {}) else '(not set)'}")
    print()
    return 0


def cmd_config_set(args):
    """Set one field in the config file."""
    manager = ConfigFileManager(get_config_path())

    if not manager.exists():
        print(f"✗ No config found at: {manager.config_path}")
        print("  Run 'openai-api config init' to create one")
        return 1

    parts = args.key.split('.')
    if parts[0] not in CONFIG_FIELDS:
        print(f"✗ Unknown config key '{parts[0]}'")
        print(f"  Valid keys: {', '.join(CONFIG_FIELDS)}")
        return 1

    if len(parts) > 1 and parts[0] != "http_options":
        print(f"✗ Only http_options accepts nested keys (got '{args.key}')")
        return 1

    # Top-level fields are all strings; only http_options values are typed.
    if parts[0] == "http_options":
        parsed_value = _parse_value(args.value)
    else:
        parsed_value = args.value

    updates = {}
    current = updates
    for part in parts[:-1]:
        current[part] = {}
        current = current[part]
    current[parts[-1]] = parsed_value

    try:
        manager.update(updates)
    except ConfigError as e:
        print(f"✗ Failed to set {args.key}: {e}")
        return 1

    shown = _mask_key(parsed_value) if parts[0] in SECRET_FIELDS else parsed_value
    print(f"✓ Set {args.key} = {shown}")
    return 0


def _mask_key(value) -> str:
    """Mask an API key for display."""
    if not value:
        return "(not set)"
    value = str(value)
    if len(value) <= 8:
        return "****"
    return value[:4] + "..." + value[-4:]


def _parse_value(value: str):
    """
    Parse a string value into appropriate Python type.

    Handles:
    - Numbers (int, float)
    - Booleans (true, false)
    - JSON arrays and objects
    - Strings (default)
    """
    if value.lower() == 'true':
        return True
    if value.lower() == 'false':
        return False

    try:
        if '.' in value:
            return float(value)
        return int(value)
    except ValueError:
        pass

    if value.startswith('[') or value.startswith('{'):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            pass

    return value
