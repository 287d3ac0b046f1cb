from .ts_interface_schema import ts_interface_schema

if __name__ == "__main__":
    ts_interface_schema()
