import io
import re

from setuptools import find_packages, setup

__version__ = re.search(
    r'__version__\s*=\s*[\'"]([^\'"]*)[\'"]',
    io.open("src/tasksched/version.py", encoding="utf_8_sig").read(),
).group(1)


setup(
    name="tasksched",
    version=__version__,
    description="tasksched is a Python library for simulating task-to-worker assignment on a compute cluster.",
    long_description="""tasksched is a Python library for simulating task-to-worker assignment on a compute cluster.""",
    author="",
    author_email="",
    package_dir={"": "src"},
    packages=find_packages("src"),
    zip_safe=False,
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2",
        "fire",
        "sortedcontainers",
    ],
    extras_require={
        "tests": ["pytest"],
    },
)
