from setuptools import setup, find_packages

version = 1, 0, "a1"
ver = "{}.{}.{}".format(*version)
with open("README.txt", encoding="utf8") as f: readme = f.read()

setup(
    # Package info
    name = "hanoi8pr",
    version = ver,
    license = "GPLv3",
    packages = find_packages(include=["hanoi8pr", "hanoi8pr.*"]),

    # Author
    author = "The hanoi8pr contributors",

    # Dependencies
    python_requires = ">=3.7, <4",
    install_requires = ["sc8pr>=3.0", "pygame>=2.0", "Pillow"],
    extras_require = {"test": ["pytest"]},

    # Entry point
    entry_points = {"gui_scripts": ["hanoi8pr = hanoi8pr.app:main"]},

    # Details
    description = "Animated Towers of Hanoi: a puzzle engine and solver with an sc8pr front end",
    long_description = readme,

    # Additional data
    keywords = "hanoi puzzle recursion animation sc8pr pygame educational",
    classifiers = [
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Education",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries :: pygame",
        "Topic :: Education",
        "Topic :: Games/Entertainment :: Puzzle Games"
    ]
)
