#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List, Optional

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from interest_calc.config.loader import ConfigLoader
from interest_calc.config.validation import ConfigValidator, ValidationError
from interest_calc.errors import ConfigurationError


def validate_config_dir(config_dir: Optional[Path] = None) -> List[ValidationError]:
    """Validate the calculator configuration found in config_dir."""
    loader = ConfigLoader.create(config_dir)
    config = loader.merge_config()
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None

    print("🔍 Validating interest calculator configuration...")

    try:
        errors = validate_config_dir(config_dir)
    except ConfigurationError as e:
        print(f"❌ Could not load configuration: {e}")
        sys.exit(1)

    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        sys.exit(1)

    # Overrides must still produce a usable configuration
    print("\n📋 Testing call-level overrides...")
    try:
        ConfigLoader.create(config_dir).load_config({"rounding": {"decimal_places": 4}})
    except ConfigurationError as e:
        print(f"❌ Override validation failed: {e}")
        sys.exit(1)

    print("\n🎉 All configuration validation passed!")
    sys.exit(0)


if __name__ == "__main__":
    main()
