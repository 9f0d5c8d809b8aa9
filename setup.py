# Welcome to the qcolor setup.py.
import sys

# Make sure that qcolor is running on Python 3.9.0 or later
# (builtin generics are used in annotations evaluated at runtime)

if sys.version_info < (3, 9, 0):
    raise RuntimeError("qcolor requires Python 3.9.0 or later.")


from setuptools import find_packages, setup

setup(
    name='qcolor',
    version='0.1.0',
    description='RGB <-> HSL conversion for quantized pixel samples',
    license='Apache License 2.0',
    packages=find_packages(include=['qcolor', 'qcolor.*']),
    python_requires='>=3.9',
    install_requires=['torch>=1.9.1', 'typing_extensions'],
    tests_require=['pytest'],
    extras_require={
        'dev': [
            'mypy[reports]',
            'pytest==7.2.1',
            'pytest-cov==4.0.0',
        ],
    },
)
