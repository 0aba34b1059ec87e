"""Allow running term-painter as ``python -m term_painter``."""

from term_painter import main

if __name__ == "__main__":
    main()
