#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from zenith_app.config.loader import ConfigLoader
from zenith_app.config.validation import ConfigValidator, ValidationError
from zenith_app.errors import ConfigurationError


def validate_merged_config(loader: ConfigLoader, overrides=None) -> List[ValidationError]:
    """Validate defaults merged with the config file and optional overrides."""
    known_fields = {
        section: set(values)
        for section, values in loader._dataclass_to_dict(loader.defaults).items()
    }
    return ConfigValidator.validate_config(loader.merge_config(overrides), known_fields)


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)

    print(f"🔍 Validating {loader.config_file} ...")

    all_valid = True

    try:
        errors = validate_merged_config(loader)
    except ConfigurationError as e:
        print(f"❌ Could not read configuration: {e}")
        sys.exit(1)

    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        all_valid = False
    else:
        print("✅ Configuration file is valid")

    # Per-call overrides must still pass validation on top of the file
    print("\n📋 Testing per-call overrides...")
    test_overrides = {
        "storage": {"backend": "memory"},
        "stretch": {"transition_duration": 5},
    }
    errors = validate_merged_config(loader, test_overrides)
    if errors:
        print("❌ Override validation failed:")
        for error in errors:
            print(f"  • {error.field}: {error.message}")
        all_valid = False
    else:
        print("✅ Override validation passed")

    if all_valid:
        config = loader.load()
        print("\n⚙️  Effective timer settings:")
        for name in ("stretch", "fitness", "breathing_sequence"):
            params = getattr(config, name)
            print(f"  • {name}: transition={params.transition_duration}s "
                  f"min_item={params.min_item_duration}s "
                  f"default_item={params.default_item_duration}s")
        print("\n🎉 All configurations are valid!")
        sys.exit(0)

    print("\n💥 Some configurations have validation errors!")
    sys.exit(1)


if __name__ == "__main__":
    main()
