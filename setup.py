import apidescriber
from setuptools import setup

setup(
    name='apidescriber',
    description='Draft OpenAPI response descriptions from a sample JSON response.',
    version=apidescriber.__version__,
    url='N/A',
    author='ycyuxin',
    author_email='ycyuxin(at)qq.com',
    packages=['apidescriber'],
    package_data={
        'apidescriber': ['schema/*.json']
    },
    entry_points={
        'console_scripts':
            [
                'apidescribe = apidescriber.apidescribe:run',
            ]
    },
    install_requires=[
        'click',
        'jsonschema',
        'PyYAML',
        'pyaml',
        'requests',
    ],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=False
)
