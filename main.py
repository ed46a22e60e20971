from core.tree_config import TreeConfig, UsageError, HelpRequested, USAGE
from core.tree_controller import TreeController, EXIT_OK, EXIT_FATAL
from dotenv import load_dotenv, find_dotenv
import sys


def load_env() -> bool:
    # .env is looked up from the working directory, not the install location
    return load_dotenv(find_dotenv(usecwd=True))


load_env()


def cli(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv

    try:
        config = TreeConfig.from_args(argv)
    except HelpRequested:
        print(USAGE)
        return EXIT_OK
    except UsageError as e:
        print(f"[gittree] ERROR: {e}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return EXIT_FATAL

    controller = TreeController(config)
    return controller.run()


if __name__ == "__main__":
    sys.exit(cli())
