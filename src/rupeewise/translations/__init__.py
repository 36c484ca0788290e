"""JSON message catalogues shipped with the rupeewise backend."""
