from hello_web.server import run_server

run_server()
