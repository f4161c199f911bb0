from setuptools import setup, find_packages

setup(
    name="freenet-agent-skills",
    version="1.0.0",
    description="AI coding agent skills for Freenet development",
    author="Freenet Project",
    license="LGPL-3.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "pydantic>=2.0",
        "PyYAML>=6.0",
        "Flask>=2.3",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "agent-skills=agent_skills.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU Lesser General Public License v3 (LGPLv3)",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    include_package_data=True,
    package_data={
        "agent_skills": [
            "catalog.yaml",
            "skills/*/*.md",
            "skills/*/references/*.md",
        ],
    },
)
