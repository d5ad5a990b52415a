#!/usr/bin/env python
import sys
from pathlib import Path

from error_snippet.diagnostics import Diagnostic, Label, NamedSource, Severity, SimpleDiagnostic, with_source
from error_snippet.handler import DiagnosticHandler
from error_snippet.render import GraphicalRenderer, RenderOptions

EXAMPLE = """def five = match () in {
    () => 5,
    () => "5",
}

def six =
    five
    + 1"""


def build_diagnostic(source: NamedSource) -> Diagnostic:
    message = (
        SimpleDiagnostic("incompatible types")
        .with_code("E0308")
        .with_severity(Severity.ERROR)
        .with_label(Label.error("The values are outputs of this match expression", (11, 48)))
        .with_label(Label.help("This has type of Void", (29, 31)))
        .with_label(Label.warning("This has type of Str", (35, 36)))
        .with_help("Outputs of match expressions must coerce to the same type")
    )
    return with_source(message, source)


def main() -> None:
    if len(sys.argv) > 1:
        input_path = Path(sys.argv[1])
        source = NamedSource(str(input_path), input_path.read_text(encoding="utf-8"))
    else:
        source = NamedSource("README.md", EXAMPLE)

    options = RenderOptions.from_env()
    renderer = GraphicalRenderer(RenderOptions(use_colors=options.use_colors, highlight_source=True))

    handler = DiagnosticHandler(renderer)
    handler.report_and_drain(build_diagnostic(source))


if __name__ == "__main__":
    main()
