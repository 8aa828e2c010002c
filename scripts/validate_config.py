#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from fxjournal_app.config.loader import ConfigLoader
from fxjournal_app.config.validation import ConfigValidator, ValidationError


def report(label: str, errors: List[ValidationError]) -> bool:
    """Print validation results; returns True when there were no errors."""
    if errors:
        print(f"❌ {label}: {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        return False

    print(f"✅ {label} is valid")
    return True


def main():
    """Main validation function."""
    print("🔍 Validating FX Journal configuration...")

    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)
    print(f"\n📂 Config directory: {loader.config_dir}")

    all_valid = True

    print("\n📊 Validating settings file...")
    try:
        settings = loader.load_settings_file()
        all_valid &= report("settings.yaml", ConfigValidator.validate_config(settings))
    except Exception as e:
        print(f"❌ Error reading settings.yaml: {e}")
        all_valid = False

    print("\n📋 Validating merged configuration...")
    try:
        merged = loader.merge_config()
        all_valid &= report("Merged configuration", ConfigValidator.validate_config(merged))
        if all_valid:
            loader.load()
    except Exception as e:
        print(f"❌ Error building configuration: {e}")
        all_valid = False

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
