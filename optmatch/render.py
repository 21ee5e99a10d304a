"""
Help, version and license views rendered with rich.

Each view reads the parser's descriptor table, metadata (name, version, header,
footer, license, version_footer) and the presentation toggles of its ParserConfig.

Palette keys
- header-section, footer-section, program-name, program-version, version-footer
- group-label, short-name, long-name, metavar, argument-description, default-value
- license-section, missing-version
- panel-title, panel-subtitle

Customization
- Define a mapping named __styles__ in __main__ to override any palette entry.
- When colorful is False, styling is suppressed; when fancy is True, views are
  wrapped in a panel.
"""
from collections import defaultdict

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .options import Arity

_palette = {
    # === Head / foot ===
    "header-section": "bold #36C5F0",  # SKY-BLUE headline
    "footer-section": "#737373",  # Dim footer gray
    "program-name": "bold #FF4D94",  # MAGENTA-PINK brand pop
    "program-version": "bold #00E6FF",  # CYAN version
    "version-footer": "#9CA3AF",

    # === Options ===
    "group-label": "bold #FFFFFF",
    "short-name": "bold #22C55E",  # GREEN short names
    "long-name": "bold #00E6FF",  # CYAN long names
    "metavar": "bold #FFD600",  # AMBER for values
    "argument-description": "#9CA3AF",
    "default-value": "italic #737373",

    # === Misc ===
    "license-section": "#9CA3AF",
    "missing-version": "bold #EF4444",

    # === Fancy panel ===
    "panel-title": "bold #FF4D94",
    "panel-subtitle": "#9CA3AF",
}


def _stylist(config):
    styles = defaultdict(str, _palette | getattr(__import__("__main__"), "__styles__", {}))

    def styler(style):
        return styles[style] if config.colorful else ""

    def text(fragment, style=""):
        # Normalize to Text; in non-colorful mode, strip styles.
        if not fragment:
            return Text("")
        if isinstance(fragment, Text):
            return fragment if config.colorful else Text(fragment.plain)
        return Text(str(fragment), style)

    return styler, text


def _emit(parser, console, renders, title):
    config = parser.config
    renderable = Group(*renders)

    if config.fancy:
        styler, text = _stylist(config)
        renderable = Panel(
            renderable,
            title=Text.assemble("[", " ", f"{parser.name or 'program'} {title}".upper(), " ", "]", style=styler("panel-title")),
            title_align="left",
            subtitle=text(parser.license, styler("panel-subtitle")) or None,
        )

    console.print(renderable)


def _version_line(parser, styler, text):
    if parser.name:
        return Text.assemble(
            text(parser.name, styler("program-name")),
            " version ",
            text(parser.version, styler("program-version")),
        )
    return Text.assemble("Version ", text(parser.version, styler("program-version")))


def _label(descriptor, config, styler, text):
    """
    "-o, --output <value>" style label; long-only names are indented to line up.
    """
    style = config.style
    label = Text()
    if descriptor.short:
        label.append(text(style.short + descriptor.short, styler("short-name")))
        if descriptor.long:
            label.append(", ")
    else:
        label.append(" " * (len(style.short) + 3))
    if descriptor.long:
        label.append(text(style.long + descriptor.long, styler("long-name")))

    match descriptor.arity:
        case Arity.SINGLE:
            label.append(" ").append(text("<value>", styler("metavar")))
        case Arity.LIST:
            label.append(" ").append(text(f"<value{config.separator}...>", styler("metavar")))
    return label


def _describe(descriptor, styler, text):
    descr = text(descriptor.descr, styler("argument-description"))
    if descriptor.default and descriptor.arity is not Arity.NONE:
        default = text(f"(default: {descriptor.default})", styler("default-value"))
        descr = Text.assemble(descr, " ", default) if descr else default
    return descr


def render_help(parser, console=None):
    """
    Print the help view for the parser.

    Sections, each behind its toggle: header, application name, version line,
    the options table (hidden descriptors skipped), footer, license.
    """
    console = console or Console()
    config = parser.config
    styler, text = _stylist(config)

    renders = []
    width = console.width - 4 * config.fancy  # Account for panel gutters

    if config.show_header and parser.header:
        renders.append(text(parser.header, styler("header-section")))

    if config.show_name and parser.name:
        renders.append(text(parser.name, styler("program-name")))

    if config.show_version and parser.version:
        renders.append(_version_line(parser, styler, text))

    entries = [
        (_label(descriptor, config, styler, text), _describe(descriptor, styler, text))
        for descriptor in parser.descriptors
        if not descriptor.hidden
    ]
    if entries:
        padding = 2
        # Description column: just past the widest label, but never beyond a third of the width.
        indent = min(max(len(label) for label, _ in entries) + padding * 2, max(width // 3, padding * 2))

        options = Text()
        options.append(text("options", styler("group-label"))).append(":")
        for label, descr in entries:
            section = Text(" " * padding)
            section.append(label)
            if descr:
                if len(section) >= indent:
                    section.append("\n").append(" " * indent)
                else:
                    section.append(" " * (indent - len(section)))
                wrapped = descr.wrap(console, max(width - indent, 10))
                section.append(wrapped[0])
                for line in wrapped[1:]:
                    section.append("\n").append(" " * indent).append(line)
            options.append("\n").append(section)
        renders.append(options)

    if config.show_footer and parser.footer:
        renders.append(text(parser.footer, styler("footer-section")))

    if config.show_license and parser.license:
        renders.append(text(parser.license, styler("license-section")))

    _emit(parser, console, renders, "help")


def render_version(parser, console=None, *, license=True):
    """
    Print the version view.

    Writes "<name> version <v>" (or "Version <v>" without a name). When no
    version is set, a notice goes to stderr instead. The version footer follows
    when show_version_footer is on, then the license unless `license=False`.
    """
    console = console or Console()
    config = parser.config
    styler, text = _stylist(config)

    renders = []
    if parser.version:
        renders.append(_version_line(parser, styler, text))
    else:
        Console(stderr=True).print(text("Version information is not set.", styler("missing-version")))

    if config.show_version_footer and parser.version_footer:
        renders.append(text(parser.version_footer, styler("version-footer")))

    if license and parser.license:
        renders.append(text(parser.license, styler("license-section")))

    if renders:
        _emit(parser, console, renders, "version")


def render_license(parser, console=None):
    console = console or Console()
    styler, text = _stylist(parser.config)
    console.print(text(parser.license, styler("license-section")))


__all__ = (
    "render_help",
    "render_version",
    "render_license",
)
