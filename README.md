# vinacore

Building blocks for a molecular docking engine, together with a small
command-line tool that splits multi-model PDBQT files. The package has no
dependencies outside the standard library.

## What is inside

- `vinacore.common`: immutable 3-vectors (`Vec`) and column-major 3x3
  matrices (`Mat`), `cross_product`, `dot_product`, `angle` (in degrees),
  `normalized_angle` (into [-pi, pi]), tolerant comparison `eq` (tolerance
  0.001), `find_min`, `fl_to_sz` and the pK to energy conversion
  `pk_to_energy`. Failed consistency checks raise `InternalError`.
- `vinacore.matrix`: `Matrix` (dense, column-major), `TriangularMatrix`
  (packed, with diagonal), `StrictlyTriangularMatrix` (packed, without
  diagonal; `append` and `append_block` add new blocks), `Array3D` indexed as
  `a[i, j, k]`, and `checked_multiply`, which raises `MemoryError` when a
  size product overflows.
- `vinacore.numerics`: `int_pow`, box clamping (`closest_between`,
  `brick_closest`, `brick_distance_sqr`) and smooth energy capping (`curl`,
  `curl_with_deriv`).
- `vinacore.atom_constants`: the element (`ElType`), AutoDock (`AdType`),
  X-Score (`XsType`) and DrugScore (`SyType`) typing schemes, the per-type
  property table (`AtomKind`, `ad_type_property`), `string_to_ad_type`
  (with `Se` treated as `S`), van der Waals radii (`xs_radius`) and the
  hydrogen-, halogen- and sulfur-bond rules (`xs_h_bond_possible`,
  `xs_hal_any_bond_possible`, `xs_sul_bond_possible`, ...).
- `vinacore.atom`: `Typing`, `AtomType`, `AtomIndex`, `Bond` and `Atom`,
  plus `num_atom_types` and `get_type_pair_index`.
- `vinacore.grid_dim`: `GridDim` (one grid axis) and helpers over triples
  of them: `grid_dims_eq`, `grid_dims_begin`, `grid_dims_end`,
  `format_grid_dims`.
- `vinacore.stats`: `mean`, `deviation`, `rmsd`, `average_difference`,
  `pearson`, `get_rankings` and `spearman`.
- `vinacore.precalculate`: `ScoringFunction`, an abstract pairwise term, and
  `Precalculate`, which tabulates one on a grid of squared distances (and, for
  halogen and sulfur bond pairs, of angles) for fast lookup (`eval_fast`) and
  interpolated energy and derivative (`eval_deriv`); `widen` flattens the
  energy wells.
- `vinacore.recent_history`: `RecentHistory`, an exponentially weighted
  running estimate with `possibly_smaller_than`.
- `vinacore.convert_substring`: `convert_substring` and `substring_is_blank`
  for 1-based fixed-column fields; bad fields raise `BadConversion`.
- `vinacore.fileio`: `open_input` and `open_output`, which raise `FileError`
  when a file cannot be opened; `ParseError`; and `Tee`, which writes to
  standard output and optionally to a log file.
- `vinacore.split`: reading and splitting multi-model PDBQT output, and the
  `vina-split` command.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Splitting docking output

A docking run writes all poses into one PDBQT file, each between `MODEL` and
`ENDMDL`, with flexible side chains between `BEGIN_RES` and `END_RES`.
`vina-split` writes every model to its own file:

    vina-split --input out.pdbqt

This writes `out_ligand_1.pdbqt`, `out_ligand_2.pdbqt`, ... and, when the
models hold flexible residues, `out_flex_1.pdbqt`, ... The numbers are
zero-padded to the width of the model count, and no file is written for an
empty part. The prefixes can be chosen:

    vina-split --input out.pdbqt --ligand pose_ --flex side_

`vina-split --help` lists the options and `vina-split --version` prints the
version. Errors are reported on standard error with exit status 1.

The same works from Python:

    from vinacore.split import parse_multimodel_pdbqt, write_multimodel_pdbqt

    models = parse_multimodel_pdbqt("out.pdbqt")
    write_multimodel_pdbqt(models, "pose_", "side_")

Each returned `Model` has `ligand` and `flex` lists of lines. A malformed
file raises `vinacore.fileio.ParseError`, which carries the file name, the
line number and the reason.

## Statistics example

    from vinacore.stats import pearson, spearman

    pearson([1, 2, 3], [2, 4, 6])       # 1.0, up to rounding
    spearman([1, 5, 3], [10, 30, 20])   # 1.0, up to rounding

## What this package does not do

It does not dock. There is no pose search, no local optimiser, no concrete
scoring function terms (a `ScoringFunction` must be supplied by the caller),
no PDBQT reader for receptors or ligands beyond model splitting, and no
parallel execution helpers.