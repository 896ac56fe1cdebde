"""Legendre polynomials, Gauss-Legendre quadrature and element bases."""