"""Entry point for running as a module: python -m ir_learner"""

from .app import main

if __name__ == "__main__":
    main()
