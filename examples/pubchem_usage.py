"""
PubChem Client Usage Examples.

Demonstrates building PUG REST queries and running them with PubChemClient.
"""

import asyncio

from bio_apis import NotFoundError
from bio_apis.pubchem import (
    CompoundProperty,
    Domain,
    FastSearch,
    FastSearchInput,
    FastSearchKind,
    IdNamespace,
    Operation,
    OutputFormat,
    Property,
    PubChemClient,
    PubChemQuery,
)


async def example_name_to_cid():
    """Resolve a compound name to CIDs."""
    async with PubChemClient() as client:
        query = PubChemQuery(Domain.COMPOUND, IdNamespace.NAME, ("aspirin",), Operation.CIDS)
        cids = await client.get_cids(query)

        print(f"aspirin -> {cids}")


async def example_similarity_search():
    """2D similarity search from a SMILES string."""
    async with PubChemClient() as client:
        query = PubChemQuery(
            domain=Domain.COMPOUND,
            namespace=FastSearch(FastSearchKind.FASTSIMILARITY_2D, FastSearchInput.SMILES),
            identifiers=("CC(=O)OC1=CC=CC=C1C(=O)O",),
            operation=Operation.CIDS,
            options={"Threshold": 95, "MaxRecords": 10},
        )
        cids = await client.get_cids(query)

        print(f"Found {len(cids)} similar compounds: {cids}")


async def example_properties():
    """Property table for a batch of CIDs."""
    async with PubChemClient() as client:
        props = await client.get_properties(
            [2244, 3672, 2519],
            [CompoundProperty.TITLE, CompoundProperty.MOLECULAR_WEIGHT, CompoundProperty.XLOGP],
        )

        for p in props:
            print(f"  CID {p.cid}: {p.title}, MW={p.molecular_weight}, XLogP={p.xlogp}")


async def example_raw_csv():
    """Any legal query can be run for its raw body."""
    async with PubChemClient() as client:
        query = PubChemQuery(
            Domain.COMPOUND,
            IdNamespace.CID,
            (2244, 3672),
            Property((CompoundProperty.INCHIKEY,)),
            OutputFormat.CSV,
        )
        print(await client.execute(query))


async def example_synonyms_and_sdf():
    async with PubChemClient() as client:
        synonyms = await client.get_synonyms(2244)
        print(f"First synonyms: {synonyms[:5]}")

        sdf = await client.load_sdf(2244)
        print(f"SDF: {len(sdf.splitlines())} lines")

        try:
            await client.get_synonyms(999999999)
        except NotFoundError as e:
            print(f"Expected: {e}")


async def main():
    print("=" * 60)
    print("PubChem Client Examples")
    print("=" * 60)

    print("\n1. Name to CID")
    print("-" * 40)
    await example_name_to_cid()

    print("\n2. Similarity Search")
    print("-" * 40)
    await example_similarity_search()

    print("\n3. Property Table")
    print("-" * 40)
    await example_properties()

    print("\n4. Raw CSV")
    print("-" * 40)
    await example_raw_csv()

    print("\n5. Synonyms and SDF")
    print("-" * 40)
    await example_synonyms_and_sdf()

    print("\n" + "=" * 60)
    print("Examples completed!")


if __name__ == "__main__":
    asyncio.run(main())
