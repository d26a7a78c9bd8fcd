#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from satsignal.config.loader import ConfigLoader
from satsignal.config.validation import ConfigValidator


def main():
    """Validate settings.yaml merged over the defaults."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)

    print(f"🔍 Validating SatSignal configuration in {loader.config_dir}...")

    try:
        config = loader.merge_config()
    except Exception as e:
        print(f"❌ Error loading configuration: {e}")
        sys.exit(1)

    errors = ConfigValidator.validate_config(config)
    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        sys.exit(1)

    print(f"  market: poll every {config['market']['poll_interval_seconds']}s, "
          f"timeout {config['market']['timeout_seconds']}s")
    print(f"  retry: {config['retry']['max_attempts']} attempts, "
          f"base backoff {config['retry']['backoff_base_seconds']}s")
    print(f"  storage: {config['storage']['profiles_path']}")
    print(f"\n🎉 Configuration is valid!")
    sys.exit(0)


if __name__ == "__main__":
    main()
