"""Allow `python -m thermal_label_service`."""

from .app import main

if __name__ == '__main__':
    main()
