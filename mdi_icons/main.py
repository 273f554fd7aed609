import argparse
import json
import sys
from pathlib import Path
from xml.etree import ElementTree

from mdi_icons.config import settings
from mdi_icons.exceptions import IconError
from mdi_icons.factory import IconsFactory
from mdi_icons.icons import Icon
from mdi_icons.logging import LoggerFactory, operation_context, setup_logging


def _parse_config_value(raw):
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def cmd_list(factory, args):
    for icon in Icon:
        print(f"{icon.resource_key}\t{icon.name}")
    return 0


def cmd_show(factory, args):
    print(factory.get_icon_data(Icon.parse(args.icon)))
    return 0


def cmd_bounds(factory, args):
    xmin, xmax, ymin, ymax = factory.create_geometry(Icon.parse(args.icon)).bbox()
    print(f"{xmin:g} {ymin:g} {xmax:g} {ymax:g}")
    return 0


def cmd_check(factory, args):
    with operation_context("check", icons=len(Icon)) as log:
        problems = factory.verify_icons()
        for icon, error in problems:
            print(f"{icon.resource_key}: {error}")
        log.info(f"{len(Icon) - len(problems)}/{len(Icon)} icons resolved")
    return 1 if problems else 0


def cmd_config(factory, args):
    if args.key is None:
        print(json.dumps(settings.settings_store.values, indent=2, sort_keys=True))
    elif args.value is None:
        print(json.dumps(settings.get_setting(args.key)))
    else:
        settings.set_setting(args.key, _parse_config_value(args.value))
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Material Design icon resources")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable verbose debug output")
    parser.add_argument("--trace", action="store_true", help="Log every resource access")
    parser.add_argument("--log-dir", type=Path, help="Also write logs to this directory")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("list", help="List embedded icons").set_defaults(handler=cmd_list)

    show = commands.add_parser("show", help="Print an icon's path data")
    show.add_argument("icon", help="Icon name, e.g. home or ICON_HOME")
    show.set_defaults(handler=cmd_show)

    bounds = commands.add_parser("bounds", help="Print an icon's bounding box")
    bounds.add_argument("icon", help="Icon name, e.g. home or ICON_HOME")
    bounds.set_defaults(handler=cmd_bounds)

    commands.add_parser("check", help="Verify every icon resolves").set_defaults(
        handler=cmd_check
    )

    config = commands.add_parser("config", help="Show or change settings")
    config.add_argument("key", nargs="?")
    config.add_argument("value", nargs="?", help="JSON value (plain text is stored as a string)")
    config.set_defaults(handler=cmd_config)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(debug=args.debug, trace=args.trace, log_dir=args.log_dir)
    log = LoggerFactory.for_cli()

    try:
        return args.handler(IconsFactory(), args)
    except (IconError, ElementTree.ParseError, KeyError, ValueError) as error:
        log.error(f"{args.command} failed: {error}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
