"""IntelliJ IDEA project and module wiring.

Project-level settings live either in a ``.ipr`` file or in
``.idea/compiler.xml``; both hold top-level ``<component name=...>``
elements. The CompilerConfiguration component gets a canonical
``annotationProcessing`` profile. Module ``.iml`` files get the generated
source folders and the processor jars in PROVIDED scope.
"""

COMPILER_CONFIGURATION = "CompilerConfiguration"
ANNOTATION_PROCESSING = "annotationProcessing"
MODULE_ROOT_MANAGER = "NewModuleRootManager"
MODULE_DIR_URL = "file://$MODULE_DIR$"
