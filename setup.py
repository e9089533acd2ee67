from setuptools import find_packages, setup

setup(
  name="wordbytes",
  author="Wordbytes developers",
  description="Binary data as passphrase words from a 65536-word list, and back",
  long_description=open("README.md").read(),
  long_description_content_type="text/markdown",
  use_scm_version={"fallback_version": "0.1.0"},
  setup_requires=["setuptools_scm"],
  packages=find_packages(exclude=["tests"]),
  python_requires=">=3.9",
  classifiers=[
    "Programming Language :: Python :: 3",
    "License :: OSI Approved :: MIT License",
    "Operating System :: OS Independent",
  ],
  install_requires=[
    "colorama>=0.4",
    "pyperclip>=1.8",
    "xdg>=5.0",
  ],
  extras_require={
    "test": ["pytest", "pytest-sugar", "pytest-mock", "coverage", "mypy", "bandit"],
    "dev": ["tox", "isort", "yapf"],
  },
  include_package_data=True,
  package_data={"wordbytes": ["data/*.txt", "data/*.md"]},
  entry_points=dict(console_scripts=["wordbytes = wordbytes.cli.__main__:main"],),
)
