from __future__ import annotations

import argparse
import logging
import sys

import uvicorn

from appcontext.config import DEFAULT_SPRING_VERSION, ConfigError, build_config
from appcontext.pipeline import generate


DESCRIPTION = """\
Generates the bean definitions for a Spring XML application context file from
the source code of Java classes.
It creates:
 * A <bean /> element for each public class
 * A <property /> element for each public field and public setter method.
 * A list of <constructor-arg /> elements if (1) there is only one constructor
   and (2) that constructor is not the default constructor.
"""

EXAMPLE = """\
example:
  appcontext generate --source=path/to/src --package=com.example.foo --package=com.example.bar
"""


def cmd_generate(args: argparse.Namespace) -> None:
	try:
		config = build_config(args.source, args.package, args.spring_version, args.recurse)
	except ConfigError as e:
		for message in e.messages:
			print(message, file=sys.stderr)
		print('Type "--help" for help.', file=sys.stderr)
		sys.exit(1)

	print(generate(config), end="")


def cmd_serve(args: argparse.Namespace) -> None:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="appcontext", description="Spring Application Context Generator")
	parser.add_argument("--verbose", action="store_true", help="Log progress to stderr")
	sub = parser.add_subparsers(dest="cmd", required=True)

	pg = sub.add_parser(
		"generate",
		help="Print a Spring bean definition file for the given packages",
		description=DESCRIPTION,
		epilog=EXAMPLE,
		formatter_class=argparse.RawDescriptionHelpFormatter,
	)
	pg.add_argument("-s", "--source", metavar="PATH", help="The directory that the Java source code is located in (required)")
	pg.add_argument(
		"-p",
		"--package",
		metavar="NAME",
		action="append",
		help='All public classes in this package are added to the bean definition file. '
		'Repeat for multiple packages. Use a blank value for the default package ("-p=") (required)',
	)
	pg.add_argument(
		"-v",
		"--spring-version",
		metavar="N",
		default=DEFAULT_SPRING_VERSION,
		help=f'The version of Spring you are using, for the XML schema (default "{DEFAULT_SPRING_VERSION}")',
	)
	pg.add_argument(
		"-r",
		"--recurse",
		action="store_true",
		help='Recurse into sub-packages ("-r -p=com.foo" also includes "com.foo.bar")',
	)
	pg.set_defaults(func=cmd_generate)

	ps = sub.add_parser("serve", help="Run FastAPI server")
	ps.add_argument("--host", default="127.0.0.1")
	ps.add_argument("--port", type=int, default=8000)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)
	return parser


def main(argv=None) -> None:
	args = build_parser().parse_args(argv)
	logging.basicConfig(
		stream=sys.stderr,
		level=logging.DEBUG if args.verbose else logging.WARNING,
		format="%(levelname)s %(name)s: %(message)s",
	)
	args.func(args)


if __name__ == "__main__":
	main()
