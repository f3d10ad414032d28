from setuptools import setup


LONG_DESC = """
localecodes parses BCP 47 language tags, such as 'en-GB', 'yue-Hant-HK' and
'sl-nedis', into structured Locale values. Each part of the tag is checked
against the standard code lists: ISO 639 for languages (in all four of its
encodings), ISO 15924 for scripts, and ISO 3166-1 or UN M.49 for regions.

A Locale can be turned back into its canonical tag, described in English
("German (Switzerland)"), and asked which direction its language is written
in. Optional SQLAlchemy column types store Locales in a database.
"""


setup(
    name="localecodes",
    version='1.0.0',
    license="MIT",
    platforms=["any"],
    description="Parses and validates BCP 47 language tags into locales",
    long_description=LONG_DESC,
    packages=['localecodes'],
    package_data={'localecodes': ['data/*.json']},
    include_package_data=True,
    install_requires=[],
    python_requires='>=3.7',
    extras_require={
        'db': ['SQLAlchemy >= 1.4'],
        'test': ['pytest', 'SQLAlchemy >= 1.4'],
    },
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
