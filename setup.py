from setuptools import setup, find_packages

NAME = 'ringdeque'

setup(
    name=NAME,
    version='0.1',
    description="Ringdeque is a bounded double-ended queue over a ring buffer",
    packages=find_packages(include=[NAME, f'{NAME}.*']),
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.7',
    install_requires=[],
    extras_require={
        'test': [
            'numpy',
            'pytest',
        ],
    },
)
