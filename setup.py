import setuptools

def get_version(path):
    for line in open(path, 'rt'):
        if line.startswith('__version__'):
            delim = '"' if '"' in line else "'"
            return line.split(delim)[1]
    else:
        raise RuntimeError("Unable to find version string.")

setuptools.setup(
    name="lookahead-iter",
    version=get_version("lookahead_iter/__init__.py"),
    description="An iterator wrapper that can peek any number of elements ahead",
    long_description=open('README.md', 'rt').read(),
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
      'deprecated',
    ],
    extras_require={
      'test': ['pytest'],
    },
    python_requires='>=3.8',
)
