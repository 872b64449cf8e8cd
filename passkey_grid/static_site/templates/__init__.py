import os
from jinja2 import Environment, PackageLoader, select_autoescape

env = Environment(
    loader=PackageLoader("passkey_grid", os.path.join("static_site", "templates")),
    autoescape=select_autoescape(["html", "xml"]),
)

directory_template = env.get_template("directory.html")
