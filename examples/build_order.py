"""Build order for a set of packages.

Packages are plain dataclasses, compared by name so that the dependency list can
refer to lightweight stand-ins instead of the full records.
"""

from dataclasses import dataclass

import toposcc as ts


@dataclass
class Package:
    name: str
    version: str = ""


packages = [
    Package("app", "2.1.0"),
    Package("http", "0.9.3"),
    Package("json", "1.4.0"),
    Package("log", "3.0.1"),
    Package("tls", "1.1.1"),
]

by_name = {package.name: package for package in packages}

# (dependency, dependent): the dependency has to be built first
requires = [
    ("http", "app"),
    ("json", "app"),
    ("log", "http"),
    ("tls", "http"),
    ("log", "json"),
]
edges = [(by_name[before], by_name[after]) for before, after in requires]

same_name = ts.KeyEquality(lambda package: package.name)

if __name__ == "__main__":
    build = ts.order(packages, edges, equality=same_name)
    print("build:   ", " -> ".join(package.name for package in build))

    teardown = ts.order_desc(packages, edges, equality=same_name)
    print("teardown:", " -> ".join(package.name for package in teardown))

    # Introduce a cycle and show what is entangled
    try:
        ts.order(packages, [*edges, (by_name["app"], by_name["log"])], equality=same_name)
    except ts.CycleDetectedError as e:
        for component in e.components:
            print("cycle:   ", ", ".join(package.name for package in component))
