import argparse
import logging
from typing import Optional

from psd_layers import Document
from psd_layers.exceptions import PSDLayersError
from psd_layers.psd.document import PSD
from psd_layers.version import __version__

try:
    from IPython.lib.pretty import pprint
except ImportError:
    from pprint import pprint

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="psd-layers command line utility.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Be more verbose.")
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "--encoding", default="macroman", help="Layer name encoding [default: macroman]."
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    export_parser = subparsers.add_parser("export", help="Export a layer as an image")
    export_parser.add_argument(
        "input_file",
        help="Input PSD file with layer index, e.g. file.psd[0] (default: 0)",
    )
    export_parser.add_argument("output_file", help="Output image file")

    show_parser = subparsers.add_parser("show", help="Show the layer list")
    show_parser.add_argument("input_file", help="Input PSD file")

    debug_parser = subparsers.add_parser("debug", help="Show layer records")
    debug_parser.add_argument("input_file", help="Input PSD file")

    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> Optional[int]:
    args = parse_args(argv)

    logging.basicConfig(level=logging.WARNING)
    package_logger = logging.getLogger("psd_layers")
    if args.verbose:
        package_logger.setLevel(logging.DEBUG)
    else:
        package_logger.setLevel(logging.INFO)

    try:
        if args.command == "export":
            input_parts = args.input_file.split("[")
            input_file = input_parts[0]
            index = int(input_parts[1].rstrip("]")) if len(input_parts) > 1 else 0
            document = Document.open(input_file, encoding=args.encoding)
            layer = document[index]
            layer.topil().save(args.output_file)
            logger.info("exported %r to %s" % (layer, args.output_file))

        elif args.command == "show":
            document = Document.open(args.input_file, encoding=args.encoding)
            print(document)
            for index, layer in enumerate(document):
                print("[%d] %s bbox=%r" % (index, "/".join(layer.name_path), layer.bbox))

        elif args.command == "debug":
            with open(args.input_file, "rb") as f:
                pprint(PSD.frombytes(f.read(), encoding=args.encoding))

    except (PSDLayersError, IndexError) as e:
        logger.error(str(e))
        return 1

    return None


if __name__ == "__main__":
    raise SystemExit(main())
