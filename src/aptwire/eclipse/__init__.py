"""Eclipse JDT/APT wiring.

Eclipse runs annotation processors through the APT plugin. It needs the
processor jars on the factory path, APT enabled in the project prefs and
``processAnnotations`` switched on in the JDT core prefs.
"""

APT_PREFS_FILE = ".settings/org.eclipse.jdt.apt.core.prefs"
JDT_PREFS_FILE = ".settings/org.eclipse.jdt.core.prefs"
FACTORYPATH_FILE = ".factorypath"
CLASSPATH_FILE = ".classpath"

PROCESS_ANNOTATIONS_KEY = "org.eclipse.jdt.core.compiler.processAnnotations"
