"""Markdown table renderer for OperationSpec.

Output layout (one fragment per operation):

    |GET|/users/{id}|
    | --- | --- |
    |summary|Get a user|
    |Params|**id** path {int} required – user identifier|
    |Responses|**200** {object} User success|
    ||**404**  not found|

Free text is written as-is; a `|` inside a description breaks the table.
"""

from swamd.parser.base import OperationSpec, Parameter, Response

EN_DASH = "–"


def render_spec(spec: OperationSpec) -> str:
    """Render an OperationSpec as markdown table rows, each ending in a newline."""
    lines = [
        f"|{spec.method.upper()}|{spec.path}|",
        "| --- | --- |",
    ]
    if spec.summary:
        lines.append(f"|summary|{spec.summary}|")
    if spec.description:
        lines.append(f"|description|{spec.description}|")
    if spec.tags:
        lines.append(f"|Tags|{', '.join(spec.tags)}|")
    if spec.accept:
        lines.append(f"|Accept|{', '.join(spec.accept)}|")
    if spec.produce:
        lines.append(f"|Produce|{', '.join(spec.produce)}|")

    lines.extend(_block("Params", [_param_cell(p) for p in spec.params]))
    lines.extend(_block("Responses", [_response_cell(r) for r in spec.responses]))

    return "".join(line + "\n" for line in lines)


def render_fragment(spec: OperationSpec) -> str:
    """Render an OperationSpec followed by the blank line separating fragments."""
    return render_spec(spec) + "\n"


def _block(label: str, cells: list[str]) -> list[str]:
    # Continuation rows leave the label column empty.
    rows = []
    for i, cell in enumerate(cells):
        prefix = f"|{label}|" if i == 0 else "||"
        rows.append(f"{prefix}{cell}|")
    return rows


def _param_cell(param: Parameter) -> str:
    mandatory = "required" if param.required else "optional"
    return f"**{param.name}** {param.location} {{{param.param_type}}} {mandatory} {EN_DASH} {param.description}"


def _response_cell(response: Response) -> str:
    return f"**{response.code}** {response.wrapper} {response.data_type} {response.description}"
