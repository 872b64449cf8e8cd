from setuptools import setup, find_packages

setup(
    name="passkey_grid",
    version="1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"passkey_grid": ["static_site/templates/*.html"]},
    description="Renders passkey directory markdown tables as responsive HTML grids.",
    install_requires=["marko>=2.0", "jinja2"],
    extras_require={"test": ["pytest", "lxml"]},
    entry_points={
        "console_scripts": [
            "passkey-grid=passkey_grid.scripts.passkey_grid:main",
        ],
    },
)
