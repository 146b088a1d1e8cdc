# plonkcore

Building blocks of a PLONK constraint system over the BLS12-381 scalar field.
Scalars are plain Python integers; the package reduces them modulo the field
order wherever it stores or combines them.

## Modules

- `plonkcore.field`: the field constants (`MODULUS`, `SIZE`, `GENERATOR`,
  `TWO_ADACITY`, `ROOT_OF_UNITY`), the helpers `reduce`, `neg` and `invert`,
  and 32-byte little-endian encoding with `to_bytes`, `from_bytes` (rejects
  non-canonical values) and `from_bytes_wide` (reduces 64 bytes).
- `plonkcore.domain`: `EvaluationDomain`, a power-of-two multiplicative
  subgroup built with `EvaluationDomain.new(num_coeffs)`. It offers `fft`,
  `ifft`, `coset_fft`, `coset_ifft`, `evaluate_all_lagrange_coefficients`,
  `evaluate_vanishing_polynomial`, `elements` and byte encoding with
  `to_bytes` / `from_bytes`. The module also exposes `bitreverse` and
  `serial_fft`.
- `plonkcore.polynomial`: `Polynomial`, coefficient form with trailing zeros
  dropped. It supports `+`, `-`, unary `-`, `*` (by a scalar, or by another
  polynomial through an FFT), `add_scaled`, `evaluate`, `degree`, `is_zero`,
  `ruffini` (division by `x - z`, remainder dropped) and byte encoding.
- `plonkcore.evaluations`: `Evaluations`, a polynomial's values over a domain,
  with element-wise `+`, `-`, `*`, `/`, `interpolate`,
  `vanishing_poly_over_coset` and byte encoding. Combining evaluations over
  different domains raises `ValueError`.
- `plonkcore.witness`: `Witness` (with `Witness.ZERO` and `Witness.ONE`),
  `WireKind`, `WireData`, `WitnessPoint` and `WnafRound`.
- `plonkcore.constraint`: `Constraint`, an immutable, fluent description of a
  gate (`mult`, `left`, `right`, `output`, `fourth`, `constant`, `public`,
  and the wires `a`, `b`, `o`, `d`), the gate constructors `arithmetic`,
  `range`, `logic`, `logic_xor`, `group_add_fixed_base` and
  `group_add_variable_base`, the `Selector` and `WiredWitness` enums, and
  `GatePolynomial`, the selectors and wires of one stored gate.
- `plonkcore.builder`: `Builder`, which allocates witnesses
  (`append_witness`), appends gates (`append_custom_gate`) and reports public
  inputs (`public_input_indexes`, `public_inputs`, `dense_public_inputs`);
  and `Circuit`, an abstract base whose `circuit(composer)` lays out gates and
  whose `size()` counts them (zero if laying out raises a `PlonkError`).
- `plonkcore.hades`: the 960 chained round constants (`constants()`) and the
  5×5 Cauchy MDS matrix (`mds()`) of the Poseidon permutation.
- `plonkcore.compress`: a compact encoding of a circuit's structure.
  `CompressedCircuit` deduplicates scalars and selector rows; `to_bytes`
  packs it with msgpack and raw-deflates it, and `from_bytes` reverses that.
  `Version.V1` shares the scalars 0, 1 and -1 implicitly; `Version.V2` also
  shares the `hades` constants and matrix. `compress(builder, version)` returns
  bytes and `decompress(data)` returns a `Builder` whose witnesses and public
  input values are all zero.
- `plonkcore.errors`: every exception derives from `PlonkError`, for example
  `InvalidEvalDomainSize`, `BlsScalarMalformed`, `BytesError` and
  `InvalidCompressedCircuit`.

## Installation

```
pip install .
```

## Example

```python
from plonkcore.builder import Builder
from plonkcore.compress import Version, compress, decompress
from plonkcore.constraint import Constraint
from plonkcore.domain import EvaluationDomain
from plonkcore.polynomial import Polynomial

# a + b - 7 = 0, with the constant carried as a public input
builder = Builder()
a = builder.append_witness(3)
b = builder.append_witness(4)
builder.append_custom_gate(Constraint().left(1).right(1).public(-7).a(a).b(b))

print(builder.public_input_indexes())  # [0]
print(len(builder))                    # 1

# compress the circuit structure and restore it
data = compress(builder, Version.V2)
restored = decompress(data)
print(restored.public_input_indexes())  # [0]

# polynomial arithmetic
p = Polynomial([4, 4, 1])   # X^2 + 4X + 4
print(p.ruffini(-2))        # X + 2
print(p.evaluate(1))        # 9

# FFT round trip
domain = EvaluationDomain.new(8)
values = domain.fft([1, 2, 3])
print(domain.ifft(values)[:3])  # [1, 2, 3]
```

## What this package does not do

It lays out and encodes circuits and provides the field, FFT and polynomial
arithmetic they rest on. It does not commit to polynomials, generate or
verify proofs, or produce proving and verifying keys: there is no commitment
scheme, prover, verifier or transcript here, and `decompress` yields a
`Builder`, not keys.

## Running the tests

```
pip install .[test]
pytest
```