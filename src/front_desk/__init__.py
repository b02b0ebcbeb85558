"""Front desk visitor management package.

Organized by feature modules (visitors, dashboard, kiosk, sweeps) with a thin
Flask controller layer over service/repository layers.
"""
