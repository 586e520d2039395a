from setuptools import setup


setup(name='shipdescriptors',
      version='0.1.0',
      description='SHIP basis descriptors for atomic structures',
      packages=['shipdescriptors',
                'shipdescriptors.basis',
                'shipdescriptors.descriptor'],
      install_requires=['numpy',
                        'ase',
                        'autode',
                        'julia'],
      extras_require={'test': ['pytest', 'scipy'],
                      'logs': ['coloredlogs']},
      license='MIT',
      author='shipdescriptors authors')
