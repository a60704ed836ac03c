"""
The RENDER layer is the limited-precision boundary (float32 VTK buffers).
"""
