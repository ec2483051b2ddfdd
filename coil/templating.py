from jinja2 import Environment, PackageLoader, select_autoescape

templates = Environment(
    loader=PackageLoader("coil", "templates"),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def render(template_name: str, **context) -> str:
    return templates.get_template(template_name).render(**context)
