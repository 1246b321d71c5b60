"""
protos/ - Wire Schema
=====================
Holds `medcard.proto` and compiles it at import time (grpcio-tools),
exposing the message module `medcard_pb2` and the stub/servicer module
`medcard_pb2_grpc`.
"""

import grpc

medcard_pb2, medcard_pb2_grpc = grpc.protos_and_services("protos/medcard.proto")
