"""Jinja2 rendering for the informational pages."""
import jinja2

_jinja_env = None


def _create_jinja_env():
    return jinja2.Environment(
        loader=jinja2.PackageLoader("benchroute", "templates"),
        autoescape=jinja2.select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def get_jinja_env():
    global _jinja_env
    if _jinja_env is None:
        _jinja_env = _create_jinja_env()
    return _jinja_env


def render_template(template_name, **context):
    """Render a template from the package ``templates`` folder."""
    return get_jinja_env().get_template(template_name).render(**context)
