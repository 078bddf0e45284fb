#!/usr/bin/env python
from setuptools import setup

exec(open("./undo_history/version.py").read())

setup(
    name="undo-history",
    version=version_string,  # type: ignore
    packages=[
        "undo_history",
        "undo_history.core",
        "undo_history.gallery",
    ],
    package_data={
        "undo_history": ["py.typed"],
    },
    include_package_data=True,
    license="MIT",
    description="Command pattern with an observable undo/redo history stack, including a redo-from-start mode.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    python_requires=">=3.8",
    install_requires=[
        "typing_extensions>=4.0.0",
        "arrow>=1.0.0",
    ],
    extras_require={
        "test": ["pytest"],
    },
    keywords=[
        "undo",
        "redo",
        "history",
        "command",
        "command pattern",
        "observable",
    ],
    classifiers=[
        "Development Status :: 3 - Alpha",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Typing :: Typed",
    ],
)
