import os
from setuptools import setup

from vercelctl import __version__ as version_string


requirements_path = os.path.join(os.path.dirname(__file__), "requirements.txt",)
requirements = []
with open(requirements_path, "r") as in_:
    requirements = [
        req.strip()
        for req in in_.readlines()
        if not req.startswith("-") and not req.startswith("#") and req.strip()
    ]


setup(
    name="vercelctl",
    version=version_string,
    description=("Open and link Vercel projects from your terminal."),
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
    ],
    python_requires=">=3.10",
    install_requires=requirements,
    extras_require={"test": ["pytest", "mock", "tox"]},
    packages=["vercelctl", "vercelctl.commands"],
    include_package_data=True,
    entry_points={
        "console_scripts": ["vercelctl = vercelctl.cmdline:main"],
        "vercelctl_commands": [
            "open = vercelctl.commands.open:Command",
            "link = vercelctl.commands.link:Command",
            "whoami = vercelctl.commands.whoami:Command",
            "config = vercelctl.commands.config:Command",
            "version = vercelctl.commands.version:Command",
        ],
    },
)
