"""Test reaction instances: balance, genericity, identity and identifiers."""
import pytest
import cycmodel as cm
from cycmodel.names import *
from cycmodel.reaction import ReactionKind


def met(metabolite_id, elements=None, compartment='CCO-CYTOSOL', coefficient=1, is_class=False):
    if elements is not None:
        elements = tuple(sorted(elements.items()))
    else:
        elements = ()
    return cm.MetaboliteInstance(metabolite_id, compartment, coefficient, elements=elements, is_class=is_class)


def plain(reactants, products, location=None, frame_id='RXN-1', **kwargs):
    return cm.ReactionInstance(kind=ReactionKind.PLAIN,
                               name=frame_id,
                               reversible=True,
                               reactants=frozenset(reactants),
                               products=frozenset(products),
                               location=location,
                               frame_id=frame_id,
                               **kwargs)


def water_formation(water_coefficient):
    return plain([met('H2', {'H': 2}, coefficient=2), met('O2', {'O': 2})],
                 [met('WATER', {'H': 2, 'O': 1}, coefficient=water_coefficient)])


def test_balanced():
    assert (cm.is_balanced(water_formation(2)))


def test_unbalanced():
    assert (not cm.is_balanced(water_formation(1)))


def test_coefficient_counts():
    counts = cm.element_counts(water_formation(2))
    assert (counts == ({'H': 4, 'O': 2}, {'H': 4, 'O': 2}))


def test_acceptor_and_donor():
    # reduced substrate + acceptor -> oxidized substrate + reduced acceptor
    rxn = plain([met('SUB-RED', {'C': 1, 'H': 4}), met(ACCEPTOR)], [met('SUB-OX', {'C': 1, 'H': 2}), met(DONOR_H2)])
    assert (cm.is_balanced(rxn))
    assert (cm.element_counts(rxn) == ({'A': 1, 'C': 1, 'H': 4}, {'A': 1, 'C': 1, 'H': 4}))


def test_acceptor_coefficient():
    rxn = plain([met('SUB-RED', {'C': 1, 'H': 8}), met(ACCEPTOR, coefficient=2)],
                [met('SUB-OX', {'C': 1, 'H': 4}), met(DONOR_H2, coefficient=2)])
    assert (cm.is_balanced(rxn))


def test_unreadable_formula():
    rxn = plain([met('A', {'C': 1})], [met('B', {'C': 1})])
    assert (cm.is_balanced(rxn))
    broken = cm.MetaboliteInstance('B', 'CCO-CYTOSOL', 1, elements=None)
    assert (not cm.is_balanced(plain([met('A', {'C': 1})], [broken])))
    assert (cm.element_counts(plain([met('A', {'C': 1})], [broken])) is None)


def test_no_formula_data():
    assert (cm.is_balanced(plain([met('A')], [met('B')])))


def test_generic():
    assert (cm.is_generic(plain([met('|Alcohols|', is_class=True)], [met('B')])))
    assert (cm.is_generic(plain([met('A')], [met('|Aldehydes|', is_class=True)])))
    assert (not cm.is_generic(water_formation(2)))


def test_structural_equality():
    r1 = plain([met('A')], [met('B')], frame_id='RXN-1')
    r2 = cm.ReactionInstance(kind=ReactionKind.INSTANTIATED,
                             name='other',
                             reversible=False,
                             reactants=frozenset([met('A')]),
                             products=frozenset([met('B')]),
                             parent_id='RXN-2')
    assert (r1 == r2)
    assert (hash(r1) == hash(r2))
    assert (r1.fingerprint == r2.fingerprint)
    assert (r1 != plain([met('A')], [met('B')], location='CCO-CYTOSOL'))
    assert (r1 != plain([met('A', coefficient=2)], [met('B')]))
    assert (r1 != plain([met('B')], [met('A')]))


def test_payload_validation():
    with pytest.raises(ValueError):
        cm.ReactionInstance(kind=ReactionKind.INSTANTIATED,
                            name='x',
                            reversible=True,
                            reactants=frozenset(),
                            products=frozenset())
    with pytest.raises(ValueError):
        cm.ReactionInstance(kind=ReactionKind.DIFFUSION,
                            name='x',
                            reversible=True,
                            reactants=frozenset(),
                            products=frozenset())
    with pytest.raises(ValueError):
        plain([met('A')], [met('B')], multi_location=True)


def test_plain_reaction_id(params):
    assert (cm.generate_reaction_id(plain([met('A')], [met('B')]), params) == 'R_RXN__45__1')
    split = plain([met('A')], [met('B')], location='CCO-CYTOSOL', multi_location=True)
    assert (cm.generate_reaction_id(split, params) == 'R_RXN__45__1_CCO__45__CYTOSOL')
    single = plain([met('A')], [met('B')], location='CCO-CYTOSOL')
    assert (cm.generate_reaction_id(single, params) == 'R_RXN__45__1')


def test_instantiated_reaction_id(params):
    rxn = cm.ReactionInstance(kind=ReactionKind.INSTANTIATED,
                              name='alcohol dehydrogenase_ETOH_ACETALD',
                              reversible=True,
                              reactants=frozenset([met('ETOH')]),
                              products=frozenset([met('ACETALD')]),
                              parent_id='ALCOHOL-DEHYDROG-RXN',
                              instance_ids=('ETOH', 'ACETALD'))
    assert (cm.generate_reaction_id(rxn, params) == 'R_ALCOHOL__45__DEHYDROG__45__RXN_ETOH_ACETALD')


def test_exchange_reaction(params):
    glc = met('GLC', {'C': 6, 'H': 12, 'O': 6}, compartment='CCO-PERI-BAC', coefficient=2)
    rxn = cm.exchange_reaction(glc, params)
    assert (rxn.kind == ReactionKind.EXCHANGE)
    assert (rxn.reversible)
    assert (rxn.name == 'GLC_Exchange')
    assert ([(m.metabolite_id, m.compartment, m.coefficient) for m in rxn.reactants] ==
            [('GLC', 'CCO-EXTRACELLULAR', 1)])
    assert ([(m.metabolite_id, m.compartment, m.coefficient) for m in rxn.products] == [('GLC', 'Boundary', 1)])
    assert (cm.is_balanced(rxn))
    assert (cm.generate_reaction_id(rxn, params) == 'R_GLC_Exchange_LPAREN_e_RPAREN_')


def test_diffusion_reaction(params):
    glc = met('GLC', {'C': 6, 'H': 12, 'O': 6}, compartment='CCO-PERI-BAC')
    rxn = cm.diffusion_reaction(glc, 'CCO-PERI-BAC', 'CCO-EXTRACELLULAR')
    assert (rxn.kind == ReactionKind.DIFFUSION)
    assert (rxn.secondary_compartment == 'CCO-EXTRACELLULAR')
    assert (rxn.name == 'GLC_passiveDiffusionReaction')
    assert (cm.generate_reaction_id(rxn, params) == 'R_GLC_passiveDiffusionReaction_LPAREN_e_RPAREN_')


def test_describe():
    text = cm.describe(water_formation(2))
    assert (text.split('\t')[0] == PLAIN)
    assert ('2 H2[CCO-CYTOSOL] + O2[CCO-CYTOSOL] <=> 2 WATER[CCO-CYTOSOL]' in text)
