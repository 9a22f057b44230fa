from setuptools import find_packages, setup


def get_version():
    ns = {}
    with open('nthprime/version.py') as f:
        exec(f.read(), ns)
    return ns['__version__']


setup(name='nthprime',
      version=get_version(),
      description='n-th prime number by bit-packed wheel sieve',
      packages=find_packages(exclude=['tests', 'tests.*']),
      python_requires='>=3.8',
      install_requires=['numpy>=1.17', 'PyYAML'],
      extras_require={'test': ['pytest']})
