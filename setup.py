from setuptools import find_namespace_packages, setup

setup(
    name='shortest-paths',
    version='0.1.0',
    description="Single-source shortest paths with Dijkstra's algorithm on interchangeable indexed priority queues",
    python_requires='>=3.8',
    package_dir={'': 'src'},
    packages=find_namespace_packages(where='src', include=['core', 'importer', 'utilities']),
    py_modules=['main'],
    install_requires=['click', 'numpy'],
    extras_require={'test': ['pytest']},
    entry_points={'console_scripts': ['shortest-paths=main:main']},
    zip_safe=False,
)
