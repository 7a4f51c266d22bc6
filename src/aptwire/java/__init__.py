"""javac and javadoc wiring for the processor bucket."""

PROCESSOR_PATH_FLAG = "-processorpath"
