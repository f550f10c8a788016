from setuptools import setup

with open('LONG_DESCRIPTION.rst') as f:
    long_description = f.read()

setup(
    name='irods-http',
    version='0.1.0',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
    packages=['irods_http', 'irods_http.http', 'irods_http.rest', 'irods_http.transport',
              'irods_http.types', 'irods_http.util'],
    install_requires=['requests>=2.7.0,<3'],
    extras_require={
        'test': ['pytest', 'mock', 'responses'],
    },
    description="Form-encoded request helpers and metadata payloads for the iRODS HTTP API",
    long_description=long_description,
)
