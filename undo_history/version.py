version = (0, 1, 0)
version_string = "0.1.0"
