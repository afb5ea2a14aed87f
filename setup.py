from setuptools import setup

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name='prettyexpr',
    version='0.1.0',
    author='prettyexpr developers',
    packages=['prettyexpr', 'prettyexpr.lib', 'prettyexpr.test'],
    scripts=[],
    description='Pretty printer for algebraic expressions, as plain text or TeX, with scope substitution',
    long_description=long_description,
    long_description_content_type="text/markdown",
    include_package_data=True,
    entry_points={
        'console_scripts': [
            'prettyexpr = prettyexpr.main:CommandLine',
            ],
        },
    install_requires=['pyparsing>=3.0',
                      'numpy',
                      ],
    extras_require={
        'test': ['pytest'],
        },
    package_dir={'prettyexpr': 'prettyexpr'},
    test_suite="prettyexpr.test",
)
