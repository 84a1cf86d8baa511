from setuptools import setup, find_packages
import os

directory = os.path.abspath(os.path.dirname(__file__))

with open(os.path.join(directory, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

setup(name='eoID',
      packages=find_packages(include=['eoID', 'eoID.*']),
      include_package_data=True,
      python_requires='>=3.7',
      use_scm_version={'fallback_version': '0.1.0'},
      description='recognition and decoding of earth observation product names',
      classifiers=[
          'License :: OSI Approved :: MIT License',
          'Operating System :: Microsoft :: Windows',
          'Operating System :: POSIX :: Linux',
          'Programming Language :: Python :: 3'
      ],
      install_requires=['progressbar2'],
      extras_require={
          'test': ['pytest'],
      },
      author='the eoID Developers',
      license='MIT',
      zip_safe=False,
      long_description=long_description,
      long_description_content_type='text/markdown')
