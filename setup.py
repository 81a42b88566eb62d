from setuptools import setup, find_packages
import compactgraph


with open('readme.rst') as f:
    long_description = f.read()


setup(
    name='compactgraph',
    description="Compact directed graphs with traversals and dominators in pure Python",
    long_description=long_description,
    version=compactgraph.__version__,
    author="compactgraph developers",
    include_package_data=True,
    packages=find_packages(exclude=["*.test.*", "test"]),
    python_requires='>=3.6',
    extras_require={
        'test': ['pytest', 'hypothesis', 'networkx'],
    },
    license='BSD',
    classifiers=[
        'License :: OSI Approved :: BSD License',
        'Development Status :: 3 - Alpha',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Topic :: Software Development :: Libraries',
    ]
)
