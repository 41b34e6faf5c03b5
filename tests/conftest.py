import pytest
import cycmodel as cm
from cycmodel.names import *


def ecoli_core():
    """A few reactions of the E. coli glycolysis/fermentation pathways in the layout of a BioCyc database"""
    frames = {
        # metabolites
        'WATER': {
            COMMON_NAME: 'H2O',
            CHEMICAL_FORMULA: [('H', 2), ('O', 1)],
            MOLECULAR_WEIGHT: '18.015',
            DBLINKS: [('LIGAND-CPD', '"C00001"'), ('LIGAND-CPD', '"C00001"'), ('CHEBI', '"15377"')]
        },
        'PROTON': {
            COMMON_NAME: 'H+',
            CHEMICAL_FORMULA: [('H', 1)],
            MOLECULAR_WEIGHT: '1.008'
        },
        'PI': {
            COMMON_NAME: 'phosphate',
            CHEMICAL_FORMULA: [('H', 2), ('O', 4), ('P', 1)],
            MOLECULAR_WEIGHT: '96.987'
        },
        'GLC': {
            COMMON_NAME: 'D-glucose',
            CHEMICAL_FORMULA: [('C', 6), ('H', 12), ('O', 6)],
            MOLECULAR_WEIGHT: '180.156d0',
            DBLINKS: [('LIGAND-CPD', '"C00031"')]
        },
        'GLC-6-P': {
            COMMON_NAME: 'D-glucose 6-phosphate',
            CHEMICAL_FORMULA: [('C', 6), ('H', 12), ('O', 9), ('P', 1)],
            MOLECULAR_WEIGHT: '258.12'
        },
        'ATP': {
            COMMON_NAME: 'ATP',
            CHEMICAL_FORMULA: [('C', 10), ('H', 13), ('N', 5), ('O', 13), ('P', 3)],
            MOLECULAR_WEIGHT: '507.18'
        },
        'ADP': {
            COMMON_NAME: 'ADP',
            CHEMICAL_FORMULA: [('C', 10), ('H', 12), ('N', 5), ('O', 10), ('P', 2)],
            MOLECULAR_WEIGHT: '427.2'
        },
        'NAD': {
            COMMON_NAME: 'NAD+',
            CHEMICAL_FORMULA: [('C', 21), ('H', 26), ('N', 7), ('O', 14), ('P', 2)],
            MOLECULAR_WEIGHT: '663.43'
        },
        'NADH': {
            COMMON_NAME: 'NADH',
            CHEMICAL_FORMULA: [('C', 21), ('H', 27), ('N', 7), ('O', 14), ('P', 2)],
            MOLECULAR_WEIGHT: '664.44'
        },
        'ETOH': {
            COMMON_NAME: 'ethanol',
            CHEMICAL_FORMULA: [('C', 2), ('H', 6), ('O', 1)],
            MOLECULAR_WEIGHT: '46.07'
        },
        'ACETALD': {
            COMMON_NAME: 'acetaldehyde',
            CHEMICAL_FORMULA: [('C', 2), ('H', 4), ('O', 1)],
            MOLECULAR_WEIGHT: '44.05'
        },
        'PROPANOL': {
            COMMON_NAME: 'propan-1-ol',
            CHEMICAL_FORMULA: [('C', 3), ('H', 8), ('O', 1)],
            MOLECULAR_WEIGHT: '60.1'
        },
        'PROPANAL': {
            COMMON_NAME: 'propanal',
            CHEMICAL_FORMULA: [('C', 3), ('H', 6), ('O', 1)],
            MOLECULAR_WEIGHT: '58.08'
        },
        'X1': {
            CHEMICAL_FORMULA: [('C', 6), ('H', 12), ('O', 6)]
        },
        'X2': {
            CHEMICAL_FORMULA: [('C', 5), ('H', 10), ('O', 5)]
        },
        'Y1': {
            CHEMICAL_FORMULA: [('C', 6), ('H', 14), ('O', 7)]
        },
        # genes
        'EG12345': {
            ACCESSION_1: '"b2388"'
        },
        'EG1': {
            ACCESSION_1: 'b1101'
        },
        'EG2': {
            COMMON_NAME: 'crr'
        },
        # reactions
        'GLUCOKIN-RXN': {
            COMMON_NAME: 'glucokinase',
            LEFT: ['GLC', 'ATP'],
            RIGHT: ['GLC-6-P', 'ADP', 'PROTON'],
            REACTION_DIRECTION: 'PHYSIOL-LEFT-TO-RIGHT',
            RXN_LOCATIONS: ['CCO-CYTOSOL']
        },
        'DUP-GLUCOKIN-RXN': {
            COMMON_NAME: 'glucokinase (duplicate record)',
            LEFT: ['GLC', 'ATP'],
            RIGHT: ['GLC-6-P', 'ADP', 'PROTON'],
            REACTION_DIRECTION: 'PHYSIOL-LEFT-TO-RIGHT',
            RXN_LOCATIONS: ['CCO-CYTOSOL']
        },
        'TRANS-RXN-GLC': {
            COMMON_NAME: 'glucose transport',
            LEFT: ['GLC'],
            RIGHT: ['GLC'],
            REACTION_DIRECTION: 'LEFT-TO-RIGHT',
            RXN_LOCATIONS: ['CCO-PM-BAC-NEG']
        },
        'ATPASE-RXN': {
            COMMON_NAME: 'ATPase',
            LEFT: ['ATP', 'WATER'],
            RIGHT: ['ADP', 'PI', 'PROTON'],
            RXN_LOCATIONS: ['CCO-CYTOSOL', 'CCO-UNKNOWN-SPACE']
        },
        'ALCOHOL-DEHYDROG-RXN': {
            COMMON_NAME: 'alcohol dehydrogenase',
            LEFT: ['|Primary-Alcohols|', 'NAD'],
            RIGHT: ['|Aldehydes|', 'NADH', 'PROTON'],
            REACTION_DIRECTION: 'REVERSIBLE'
        },
        'GENERIC-HYDRATION-RXN': {
            COMMON_NAME: 'hydration',
            LEFT: ['|ClassX|', 'WATER'],
            RIGHT: ['|ClassY|']
        },
        'BAD-RXN': {
            LEFT: ['GLC'],
            RIGHT: ['ETOH']
        },
        'CB-RXN': {
            COMMON_NAME: 'glucose-6-phosphatase',
            LEFT: ['GLC'],
            RIGHT: ['GLC-6-P'],
            REACTION_DIRECTION: 'RIGHT-TO-LEFT',
            CANNOT_BALANCE: 'T'
        },
        'PROTEIN-RXN': {
            COMMON_NAME: 'protein kinase',
            LEFT: ['ATP', 'WATER'],
            RIGHT: ['ADP', 'PI', 'PROTON']
        },
    }
    classes = {
        'CCO-SPACE': ['CCO-CYTOSOL', 'CCO-PERI-BAC', 'CCO-EXTRACELLULAR', 'CCO-UNKNOWN-SPACE'],
        '|Primary-Alcohols|': ['ETOH', 'PROPANOL'],
        '|Aldehydes|': ['ACETALD', 'PROPANAL'],
        '|ClassX|': ['X1', 'X2'],
        '|ClassY|': ['Y1'],
        '|Transport-Reactions|': ['TRANS-RXN-GLC'],
        '|Protein-Reactions|': ['PROTEIN-RXN'],
        '|Polynucleotide-Reactions|': [],
    }
    annotations = [
        ('TRANS-RXN-GLC', RXN_LOCATIONS, 'CCO-PM-BAC-NEG', 'CCO-IN', 'CCO-CYTOSOL'),
        ('TRANS-RXN-GLC', RXN_LOCATIONS, 'CCO-PM-BAC-NEG', 'CCO-OUT', 'CCO-PERI-BAC'),
        ('TRANS-RXN-GLC', LEFT, 'GLC', COMPARTMENT, 'CCO-OUT'),
        ('TRANS-RXN-GLC', RIGHT, 'GLC', COMPARTMENT, 'CCO-IN'),
    ]
    enzymes = {'GLUCOKIN-RXN': ['GLK-MONOMER', 'PTS-CPLX']}
    genes = {'GLK-MONOMER': ['EG12345'], 'PTS-CPLX': ['EG1', 'EG2']}
    return cm.InMemoryDatabase(frames=frames, classes=classes, annotations=annotations, enzymes=enzymes, genes=genes)


@pytest.fixture(scope="session")
def ecoli_db() -> cm.InMemoryDatabase:
    """Provide session-level fixture for the example database."""
    return ecoli_core()


@pytest.fixture
def params() -> cm.ModelParameters:
    """Provide default model parameters."""
    return cm.ModelParameters()


@pytest.fixture(scope="session")
def ecoli_network(ecoli_db) -> cm.ReactionNetwork:
    """Provide session-level fixture for the network built with all stages."""
    return cm.ReactionNetwork.from_database(ecoli_db, cm.ModelParameters())
