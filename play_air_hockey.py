#!/usr/bin/env python3
"""
Main script to launch Air Hockey with PyGame graphical interface
"""

import importlib.util
import logging
import sys

if __name__ == "__main__":
    dependencies = ("pygame", "pydantic", "numpy")
    missing = [name for name in dependencies if importlib.util.find_spec(name) is None]
    if missing:
        print("Checking dependencies:")
        for name in missing:
            print(f"✗ {name} is not installed - pip install {name}")
        sys.exit(1)

    from air_hockey.gui.game_app import main
    from air_hockey.utils.keyboard_layout import auto_configure_layout
    from air_hockey.utils.keyboard_layout import show_layout_help

    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s"
    )

    print("=== AIR HOCKEY ===")
    print("Two-player air hockey")
    print()

    layout = auto_configure_layout()
    print(f"Detected keyboard configuration: {layout.upper()}")
    print()
    print(show_layout_help())
    print("Starting game...")
    print()

    main()
