import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from balsapy.compiler import CompileOptions, compile_text
from balsapy.diagnostics import RENDER_INVALID_PARAMETER_TYPE, RENDER_MISSING_PARAMETER, format_diagnostic
from balsapy.errors import InvalidParameterTypeError, MissingParameterError, TemplateRenderError
from balsapy.renderer import Renderer, render_compiled
from balsapy.text import TextRange
from balsapy.values import ColorValue, FloatValue, IntegerValue, StringValue, Value, ValueType
from tests._shared_cases import STYLED_PAGE, TEMPLATE_CASES, TemplateCase, case_id


def _render(source: str, **parameters: Value) -> str:
    return render_compiled(source, compile_text(source), parameters)


def test_substitutes_parameter() -> None:
    assert _render("Hello {{ name : string }}!", name=StringValue("World")) == "Hello World!"


def test_falls_back_to_default_value() -> None:
    source = '{{ name : string, defaultValue : "Unknown" }}'

    assert _render(source) == "Unknown"
    assert _render(source, name=StringValue("Given")) == "Given"


def test_missing_parameter_without_default() -> None:
    source = "value: {{ x : int }}"

    with pytest.raises(MissingParameterError, match="missing parameter `x`") as exc_info:
        _render(source)

    assert exc_info.value.name == "x"
    assert exc_info.value.range == TextRange.from_offsets(7, 20)
    assert exc_info.value.to_diagnostic().code == RENDER_MISSING_PARAMETER.code


@pytest.mark.parametrize("case", [case for case in TEMPLATE_CASES if case.block_count == 0], ids=case_id)
def test_template_without_blocks_renders_verbatim(case: TemplateCase) -> None:
    assert _render(case.source) == case.source


def test_literal_text_around_blocks_is_copied_exactly() -> None:
    source = "a { b } {{ x : int }} c {d}\n"

    assert _render(source, x=IntegerValue(1)) == "a { b } 1 c {d}\n"


def test_declaration_blocks_are_kept_verbatim_by_default() -> None:
    source = '{{@ accent : color = "red" }}<b>{{ x : int }}</b>'

    assert _render(source, x=IntegerValue(3)) == '{{@ accent : color = "red" }}<b>3</b>'


def test_elided_declaration_blocks_render_as_nothing() -> None:
    source = '{{@ accent : color = "red" }}<b>{{ x : int }}</b>'
    compiled = compile_text(source, CompileOptions(elide_declaration_blocks=True))

    assert render_compiled(source, compiled, {"x": IntegerValue(3)}) == "<b>3</b>"


def test_integer_parameter_renders_as_float() -> None:
    assert _render("{{ w : float }}", w=IntegerValue(80000)) == "80000"


def test_float_parameters_render_without_exponent() -> None:
    assert _render("{{ w : float }}", w=FloatValue(1e20)) == "100000000000000000000"
    assert _render("{{ w : float }}", w=FloatValue(0.00001)) == "0.00001"


def test_integer_parameter_outside_32_bits_is_rejected() -> None:
    with pytest.raises(InvalidParameterTypeError) as exc_info:
        _render("{{ w : float }}", w=IntegerValue(3_000_000_000))

    error = exc_info.value
    assert error.received_value == IntegerValue(3_000_000_000)
    assert error.received_type is ValueType.INTEGER
    assert error.expected_type is ValueType.FLOAT
    assert error.to_diagnostic().code == RENDER_INVALID_PARAMETER_TYPE.code


def test_string_parameter_cast_to_color() -> None:
    source = "{{ c : color }}"

    assert _render(source, c=StringValue("purple")) == "purple"
    with pytest.raises(InvalidParameterTypeError, match="parameter `c` expected type `color`"):
        _render(source, c=StringValue("not-a-color"))


@pytest.mark.parametrize(
    ("declared", "value"),
    [
        ("string", IntegerValue(1)),
        ("int", StringValue("1")),
        ("int", FloatValue(1.0)),
        ("float", StringValue("1.0")),
        ("color", FloatValue(1.0)),
    ],
)
def test_no_cross_casts(declared: str, value: Value) -> None:
    with pytest.raises(TemplateRenderError):
        _render(f"{{{{ v : {declared} }}}}", v=value)


def test_colors_render_as_strings() -> None:
    assert _render("{{ s : string }}", s=ColorValue("#abcdef")) == "#abcdef"


def test_extra_parameters_are_ignored() -> None:
    assert _render("{{ a : int }}", a=IntegerValue(1), unused=StringValue("x")) == "1"


def test_styled_page_renders_defaults() -> None:
    output = _render(STYLED_PAGE)

    assert "color: orange;" in output
    assert "width: 80000px;" in output
    assert "<h1>Untitled</h1>" in output
    assert output.startswith('{{@ accent : color = "purple", columns : int = 3 }}')


def test_renderer_is_reusable_and_pure() -> None:
    source = "{{ a : int }}-{{ b : string }}"
    compiled = compile_text(source)
    renderer = Renderer(source, compiled)

    first = renderer.render({"a": IntegerValue(1), "b": StringValue("x")})
    second = renderer.render({"a": IntegerValue(1), "b": StringValue("x")})
    other = renderer.render({"a": IntegerValue(2), "b": StringValue("y")})

    assert first == second == "1-x"
    assert other == "2-y"
    assert renderer.compiled_template == compile_text(source)


def test_one_compiled_template_renders_from_many_threads() -> None:
    source = '<p style="width: {{ w : float }}px">{{ n : int }} {{ label : string, defaultValue : "none" }}</p>'
    compiled = compile_text(source)
    renderer = Renderer(source, compiled)
    barrier = threading.Barrier(8, timeout=10)

    def render(n: int) -> str:
        parameters: dict[str, Value] = {"w": IntegerValue(n * 10), "n": IntegerValue(n)}
        if n % 2:
            parameters["label"] = StringValue(f"odd-{n}")
        barrier.wait()
        return renderer.render(parameters)

    with ThreadPoolExecutor(max_workers=8) as pool:
        outputs = list(pool.map(render, range(64)))

    for n, output in enumerate(outputs):
        label = f"odd-{n}" if n % 2 else "none"
        assert output == f'<p style="width: {n * 10}px">{n} {label}</p>'
    assert renderer.compiled_template == compile_text(source)


def test_render_uses_supplied_color_validator() -> None:
    source = "{{ c : color }}"
    compiled = compile_text(source)

    output = render_compiled(
        source,
        compiled,
        {"c": StringValue("brand-blue")},
        color_validator=lambda text: text.startswith("brand-"),
    )

    assert output == "brand-blue"


def test_render_error_formats_as_diagnostic() -> None:
    source = "line one\n{{ x : int }}"

    with pytest.raises(MissingParameterError) as exc_info:
        _render(source)

    rendered = format_diagnostic(exc_info.value.to_diagnostic(), source)
    assert rendered.startswith("2:1: error RENDER_MISSING_PARAMETER missing parameter `x`")
