from setuptools import setup, find_packages
import os


here = os.path.abspath(os.path.dirname(__file__))


install_requires = [
    line.strip() for line in open(
        os.path.join(here, 'requirements.txt'))
    if len(line.strip()) > 0
]

with open(os.path.join(here, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()


setup(
    name="easierccg",
    version="0.1.0",  # NOQA
    description='An exhaustive chart parser for combinatory categorial grammar',
    long_description=long_description,
    long_description_content_type='text/markdown',
    license='MIT License',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=install_requires,
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['easierccg=easierccg.__main__:cli'],
    },
    python_requires='>=3.8',
    classifiers=[
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],
    zip_safe=False,
)
