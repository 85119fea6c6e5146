"""Interfaces (application boundary) for GOVCAT.

Defines framework-free application contracts: the record store port, the ID
generator port, and the errors they raise. Business rules stay out of this
package.

Dependency rule: this package is independent; do not import from any
`govcat.*` modules. It may be imported by `govcat.service_layer`,
`govcat.adapters`, and `govcat.bootstrap`.
"""
