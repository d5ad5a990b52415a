import pytest

from error_snippet.diagnostics import Diagnostic, Severity, SimpleDiagnostic
from error_snippet.handler import DiagnosticHandler, Handler
from error_snippet.render import GraphicalRenderer, Renderer, RenderOptions, TextSink


class StubRenderer(Renderer):
    def __init__(self) -> None:
        self.rendered: list[str] = []

    def render_to(self, stream: TextSink, diagnostic: Diagnostic) -> None:
        self.rendered.append(diagnostic.message())


def test_drain_removes_all() -> None:
    renderer = StubRenderer()
    handler = DiagnosticHandler(renderer)

    handler.report(SimpleDiagnostic("foo"))
    assert handler.count() == 1

    handler.drain()
    assert handler.count() == 0
    assert renderer.rendered == ["foo"]


def test_report_and_drain_renders_in_report_order() -> None:
    renderer = StubRenderer()
    handler = DiagnosticHandler(renderer)

    handler.report(SimpleDiagnostic("first"))
    handler.report_and_drain(SimpleDiagnostic("second"))

    assert renderer.rendered == ["first", "second"]
    assert handler.count() == 0


def test_drain_without_errors_does_not_exit() -> None:
    renderer = StubRenderer()
    handler = DiagnosticHandler(renderer, exit_on_error=True)

    handler.report(SimpleDiagnostic("just a warning").with_severity(Severity.WARNING))
    handler.drain()

    assert renderer.rendered == ["just a warning"]


def test_drain_exits_after_errors() -> None:
    renderer = StubRenderer()
    handler = DiagnosticHandler(renderer).enable_exit_on_error()

    handler.report(SimpleDiagnostic("first"))
    handler.report(SimpleDiagnostic("second"))
    handler.report(SimpleDiagnostic("note").with_severity(Severity.NOTE))

    with pytest.raises(SystemExit) as exc_info:
        handler.drain()

    assert exc_info.value.code == 1
    assert renderer.rendered == ["first", "second", "note", "aborting due to 2 previous errors"]


def test_default_handler_writes_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    handler = DiagnosticHandler(GraphicalRenderer(RenderOptions.plain()))

    handler.report_and_drain(SimpleDiagnostic("to stderr").with_code("E1"))

    assert capsys.readouterr().err == "× error[E1]: to stderr\n"
    assert isinstance(handler, Handler)


class FailingRenderer(StubRenderer):
    def render_to(self, stream: TextSink, diagnostic: Diagnostic) -> None:
        if not self.rendered:
            self.rendered.append("<failed>")
            raise OSError("stderr closed")
        super().render_to(stream, diagnostic)


def test_drain_keeps_undrained_diagnostics_when_rendering_fails() -> None:
    renderer = FailingRenderer()
    handler = DiagnosticHandler(renderer)

    handler.report(SimpleDiagnostic("first"))
    handler.report(SimpleDiagnostic("second"))

    with pytest.raises(OSError, match="stderr closed"):
        handler.drain()

    assert handler.count() == 2

    handler.drain()
    assert handler.count() == 0
    assert renderer.rendered == ["<failed>", "first", "second"]
