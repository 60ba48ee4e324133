from setuptools import setup, find_packages

setup(
    name="pr-notifier",
    version="1.0.0",
    description="Post open GitHub pull requests to a Slack channel",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.31.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "pr-notifier=pr_notifier.cli:main",
        ],
    },
)
