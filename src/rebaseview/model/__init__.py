"""
The MODEL layer contains pure data structures and geometry generation.
It has NO knowledge of the GUI (Qt) or the Visualization (PyVista).
All coordinates here are float64.
"""
