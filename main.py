import sys

from rich.pretty import pprint

from optmatch import *

parser = Parser(
    [
        OptionDescriptor("", "help", descr="Display help information", help=True),
        OptionDescriptor("v", "", descr="Display version information", version=True),
        OptionDescriptor("o", "output", Arity.SINGLE, "output.txt", "Specify output file"),
        OptionDescriptor("l", "list", Arity.LIST, "a,b", "Specify a list of values (comma-separated)"),
    ],
    ParserConfig(separator=",", show_name=False, show_version=False, show_version_footer=True),
    name="optmatch",
    version=version_string(1, 0, 0),
    header="Usage: optmatch [options]\n",
    footer="\nMaintained alongside the optmatch package.",
    license="Licensed under the BSD-2-Clause License.",
    version_footer="Maintained alongside the optmatch package.",
)


if __name__ == '__main__':
    outcome = parser.run(sys.argv)
    if isinstance(outcome, Error):
        sys.exit(1)
    if outcome.ok:
        if parser.has_option("o"):
            print("Output file specified:", parser.get_value("o"))
        elif parser.has_option("list"):
            print("List values specified:", ", ".join(parser.get_values("l")))
        pprint(parser.parsed)
