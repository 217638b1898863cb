"""
TwineMedia CLI: `twinemedia` command.

Commands:
  twinemedia auth login       Log in with email and password
  twinemedia info             Instance version
  twinemedia whoami           Account info for the saved token
  twinemedia media <cmd>      List, fetch, upload and delete media
  twinemedia tags list        List tags
  twinemedia lists list       List lists
  twinemedia tasks <cmd>      List and cancel tasks
"""

import logging

try:
    import click
    import rich  # noqa: F401
except ImportError:
    raise SystemExit("CLI requires extras: pip install twinemedia-client[cli]")

from twinemedia.cli.auth import auth, info_cmd, whoami_cmd
from twinemedia.cli.catalog import lists, tags
from twinemedia.cli.media import media
from twinemedia.cli.tasks import tasks


@click.group()
@click.version_option("0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Log requests to stderr")
def main(verbose: bool):
    """TwineMedia CLI: browse and manage a TwineMedia instance."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")


main.add_command(auth)
main.add_command(info_cmd)
main.add_command(whoami_cmd)
main.add_command(media)
main.add_command(tags)
main.add_command(lists)
main.add_command(tasks)


if __name__ == "__main__":
    main()
