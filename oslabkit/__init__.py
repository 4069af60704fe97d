"""Operating-systems lab exercises: file utilities, process demos, CPU scheduling, synchronisation and shared memory."""

__version__ = "0.1.0"