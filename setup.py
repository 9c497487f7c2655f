from setuptools import setup, find_packages
import pyfunge


with open('readme.rst') as f:
    long_description = f.read()


setup(
    name='pyfunge',
    description="A befunge interpreter implemented in pure Python",
    long_description=long_description,
    version=pyfunge.__version__,
    author='pyfunge developers',
    include_package_data=True,
    packages=find_packages(exclude=["*.test.*", "test"]),
    python_requires='>=3.6',
    extras_require={
        'test': ['pytest', 'hypothesis'],
    },
    license='BSD',
    classifiers=[
        'License :: OSI Approved :: BSD License',
        'Development Status :: 3 - Alpha',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Software Development :: Interpreters',
    ]
)
