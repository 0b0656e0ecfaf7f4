"""component-kit -- React component tooling.

Three independent command-line tools share this package:

- ``generate-component`` (:mod:`component_kit.scaffolder`)
- ``style-validator`` (:mod:`component_kit.validator`)
- ``type-generator`` (:mod:`component_kit.typegen`)
"""

__version__ = "0.1.0"
