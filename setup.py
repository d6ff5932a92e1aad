"""Package build script"""
import re
import setuptools

ver_file = 'VERSION'

# Pull package version number from the VERSION file
with open(ver_file, 'r', encoding='utf-8') as f:
    __version__ = f.read().strip()

if re.match(r'^\d+\.\d+\.\d+(?:\.[a-zA-Z0-9]+)?$', __version__) is None:
    raise EnvironmentError(f'Could not find valid version number in {ver_file}; aborting setup')

with open("./README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="geodesics",
    version=__version__,
    author="",
    author_email="",
    description="Direct and inverse geodesic calculations on an ellipsoid of revolution.",
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages(
        include=('geodesics*', ),
        exclude=('*tests', 'tests*')
    ),
    package_data={"geodesics": ["py.typed"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent"
    ],
    python_requires='>=3.8',
    install_requires=[
        'numpy>=1.20',
        'pydantic>=2,<3',
        'typing_extensions>=4',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
