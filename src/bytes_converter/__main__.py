from bytes_converter.cmd.cli import app

app(prog_name="bytes-converter")
