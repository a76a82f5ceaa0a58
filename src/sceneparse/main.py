"""
sceneparse - Scene Release Name Parser
Main entry point.
"""

import sys
from pathlib import Path

try:
    _package = __package__
except NameError:
    _package = None

if not _package:
    _script_path = Path(__file__).resolve()
    src_path = _script_path.parent.parent
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))
    from sceneparse.core import setup_logging
    from sceneparse.core.validation import validate_and_raise
    from sceneparse.ui.cli import SceneParseCLI
else:
    from .core import setup_logging
    from .core.validation import validate_and_raise
    from .ui.cli import SceneParseCLI

logger = setup_logging()


def main():
    """Main entry point."""
    logger.debug("Starting sceneparse")
    try:
        try:
            validate_and_raise()
            logger.debug("Configuration validation passed")
        except Exception as e:
            logger.error(f"Configuration validation failed: {e}")
            raise
        
        cli = SceneParseCLI()
        exit_code = cli.run()
    except KeyboardInterrupt:
        logger.debug("Application interrupted by user")
        raise
    except Exception:
        logger.exception("Unhandled exception occurred")
        raise
    finally:
        logger.debug("Application shutting down")
    
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
