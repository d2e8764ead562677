from setuptools import setup, find_packages

setup(
    name="lrclib-lyrics",
    version="0.1.0",
    description="Lyric provider for media servers that looks up plain and synchronized lyrics on lrclib.net",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    python_requires=">=3.10",
    license="MIT",
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={"lrclib_lyrics": ["py.typed"]},
    install_requires=[
        "httpx",
        "typer",
    ],
    extras_require={
        "dev": [
            "pytest",
            "black",
            "ruff",
            "mypy",
        ]
    },
    entry_points={
        "console_scripts": [
            "lrclib-lyrics=lrclib_lyrics.cli:main",
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Multimedia :: Sound/Audio",
    ],
    keywords="lyrics lrclib lrc synchronized media-server",
)
