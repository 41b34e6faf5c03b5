"""Test the instantiation of generic reactions."""
import pytest
import cycmodel as cm
from cycmodel.names import *
from cycmodel.reaction import ReactionKind


class FailingClassLookup(cm.InMemoryDatabase):

    def get_class_all_instances(self, class_id):
        raise cm.DatabaseError('Connection lost.', {'class': class_id})


def generic_db(db_class=cm.InMemoryDatabase, specific_forms=None):
    frames = {
        'WATER': {
            CHEMICAL_FORMULA: [('H', 2), ('O', 1)]
        },
        'X1': {
            CHEMICAL_FORMULA: [('C', 6), ('H', 12), ('O', 6)]
        },
        'Y1': {
            CHEMICAL_FORMULA: [('C', 6), ('H', 14), ('O', 7)]
        },
        'RXN-Z': {
            LEFT: ['|ClassZ|', 'WATER'],
            RIGHT: ['Y1']
        },
    }
    return db_class(frames=frames, classes={'|ClassZ|': ['X1', 'GHOST']}, specific_forms=specific_forms)


def import_one(db, reaction_id, params):
    return cm.reactions_from_database(db, reaction_id, params)[0]


def test_single_balanced_candidate(ecoli_db, params):
    parent = import_one(ecoli_db, 'GENERIC-HYDRATION-RXN', params)
    result = cm.instantiate_generic_reaction(ecoli_db, parent, params)
    assert (result.candidates == 2)
    assert (result.rejected == 1)
    assert (not result.failed)
    assert (len(result.children) == 1)
    child = result.children[0]
    assert (child.kind == ReactionKind.INSTANTIATED)
    assert (child.parent_id == 'GENERIC-HYDRATION-RXN')
    assert (child.instance_ids == ('X1', 'Y1'))
    assert (child.name == 'hydration_X1_Y1')
    assert (cm.is_balanced(child))
    assert (not cm.is_generic(child))
    assert (sorted(m.metabolite_id for m in child.reactants) == ['WATER', 'X1'])
    assert (cm.generate_reaction_id(child, params) == 'R_GENERIC__45__HYDRATION__45__RXN_X1_Y1')


def test_children_keep_compartment_and_coefficient(ecoli_db, params):
    parent = import_one(ecoli_db, 'GENERIC-HYDRATION-RXN', params)
    child = cm.instantiate_generic_reaction(ecoli_db, parent, params).children[0]
    assert ({(m.compartment, m.coefficient) for m in child.metabolites} == {('CCO-CYTOSOL', 1)})
    assert (child.reversible == parent.reversible)
    assert (child.location == parent.location)


def test_two_classes(ecoli_db, params):
    parent = import_one(ecoli_db, 'ALCOHOL-DEHYDROG-RXN', params)
    result = cm.instantiate_generic_reaction(ecoli_db, parent, params)
    assert (result.candidates == 4)
    assert (result.rejected == 2)
    assert (sorted(c.instance_ids for c in result.children) == [('ETOH', 'ACETALD'), ('PROPANOL', 'PROPANAL')])


def test_not_generic(ecoli_db, params):
    rxn = import_one(ecoli_db, 'GLUCOKIN-RXN', params)
    assert (cm.instantiate_generic_reaction(ecoli_db, rxn, params) is None)


def test_not_plain(ecoli_db, params):
    rxn = import_one(ecoli_db, 'GENERIC-HYDRATION-RXN', params)
    child = cm.instantiate_generic_reaction(ecoli_db, rxn, params).children[0]
    assert (cm.instantiate_generic_reaction(ecoli_db, child, params) is None)


def test_cannot_balance(params):
    db = generic_db()
    db.add_frame('RXN-Z', {LEFT: ['|ClassZ|', 'WATER'], RIGHT: ['Y1'], CANNOT_BALANCE: 'T'})
    rxn = import_one(db, 'RXN-Z', params)
    assert (cm.instantiate_generic_reaction(db, rxn, params) is None)


def test_specific_forms(params):
    db = generic_db(specific_forms={'RXN-Z': ['RXN-Z-1']})
    rxn = import_one(db, 'RXN-Z', params)
    assert (cm.instantiate_generic_reaction(db, rxn, params) is None)


def test_failed_metabolite_load(params):
    db = generic_db()
    rxn = import_one(db, 'RXN-Z', params)
    result = cm.instantiate_generic_reaction(db, rxn, params)
    assert (result.candidates == 2)
    assert (result.rejected == 1)
    assert ([c.instance_ids for c in result.children] == [('X1', )])


def test_failed_class_lookup(params):
    db = generic_db(FailingClassLookup)
    rxn = import_one(db, 'RXN-Z', params)
    result = cm.instantiate_generic_reaction(db, rxn, params)
    assert (result.failed)
    assert (result.children == [])


def test_class_cache(ecoli_db, params):
    cache = {}
    parent = import_one(ecoli_db, 'ALCOHOL-DEHYDROG-RXN', params)
    cm.instantiate_generic_reaction(ecoli_db, parent, params, cache)
    assert (cache == {'|Primary-Alcohols|': ['ETOH', 'PROPANOL'], '|Aldehydes|': ['ACETALD', 'PROPANAL']})


def test_empty_class(params):
    db = cm.InMemoryDatabase(frames={'RXN-E': {LEFT: ['|Empty|'], RIGHT: ['|Empty|']}}, classes={'|Empty|': []})
    rxn = import_one(db, 'RXN-E', params)
    result = cm.instantiate_generic_reaction(db, rxn, params)
    assert (result.candidates == 1)
    assert ([c.instance_ids for c in result.children] == [('|Empty|', )])


class FailingSpecificForms(cm.InMemoryDatabase):

    def specific_forms_of_reaction(self, reaction_id):
        raise cm.DatabaseError('Connection lost.', {'reaction': reaction_id})


def test_failed_specific_forms_lookup(params):
    db = generic_db(FailingSpecificForms)
    rxn = import_one(db, 'RXN-Z', params)
    result = cm.instantiate_generic_reaction(db, rxn, params)
    assert (result.failed)
    assert (result.children == [])
    assert (result.candidates == 0)


def test_empty_class_child_stays_generic(params):
    db = cm.InMemoryDatabase(frames={'RXN-E': {LEFT: ['|Empty|'], RIGHT: ['|Empty|']}}, classes={'|Empty|': []})
    rxn = import_one(db, 'RXN-E', params)
    child = cm.instantiate_generic_reaction(db, rxn, params).children[0]
    assert (child.kind == ReactionKind.INSTANTIATED)
    assert (cm.is_generic(child))


def test_shared_instance_collapses(params):
    db = cm.InMemoryDatabase(frames={
        'X': {
            CHEMICAL_FORMULA: [('C', 1), ('H', 2)]
        },
        'P': {
            CHEMICAL_FORMULA: [('C', 2), ('H', 4)]
        },
        'RXN-D': {
            LEFT: ['|A|', '|B|'],
            RIGHT: ['P']
        },
    },
                             classes={
                                 '|A|': ['X'],
                                 '|B|': ['X']
                             })
    rxn = import_one(db, 'RXN-D', params)
    result = cm.instantiate_generic_reaction(db, rxn, params)
    assert (result.candidates == 1)
    assert (result.rejected == 1)
    assert (result.children == [])
