"""Run the kubedepot command line tool with `python -m kubedepot`."""

from kubedepot.tool.kubedepot import main

if __name__ == "__main__":
    main()
